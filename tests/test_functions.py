from mlist.functions import always, compose, curry, identity


def test_identity():
    assert identity('value') == 'value'


def test_always():
    f = always(1)
    assert f() == 1
    assert f(None, key='ignored') == 1


def test_compose():
    f = compose(str, lambda v: v * 2, lambda v: v + 1)
    assert f(1) == '4'


def test_curry():
    @curry
    def f(a, b, c=3):
        return a + b + c

    assert f(1, 2) == 6
    assert f(1)(2) == 6
    assert f(1)(2, c=0) == 3
    assert f.__name__ == 'f'
