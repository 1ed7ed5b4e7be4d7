from hypothesis import assume, given

from mlist import compose, identity
from mlist.hypothesis_strategies import anything, trampolines, unaries
from mlist.trampoline import Call, Done, defer, value

from .monad_test import MonadTest
from .utils import recursion_limit


class TestTrampoline(MonadTest):
    @given(trampolines(anything()))
    def test_right_identity_law(self, trampoline):
        assert trampoline.and_then(Done).run() == trampoline.run()

    @given(anything(), unaries(trampolines(anything())))
    def test_left_identity_law(self, v, f):
        assert Done(v).and_then(f).run() == f(v).run()

    @given(
        trampolines(anything()),
        unaries(trampolines(anything())),
        unaries(trampolines(anything()))
    )
    def test_associativity_law(self, trampoline, f, g):
        assert trampoline.and_then(f).and_then(g).run(
        ) == trampoline.and_then(lambda x: f(x).and_then(g)).run()

    @given(anything())
    def test_equality(self, v):
        assert Done(v) == Done(v)

    @given(anything(), anything())
    def test_inequality(self, first, second):
        assume(first != second)
        assert Done(first) != Done(second)

    @given(anything())
    def test_identity_law(self, v):
        assert Done(v).map(identity).run() == Done(v).run()

    @given(unaries(anything()), unaries(anything()), anything())
    def test_composition_law(self, f, g, v):
        h = compose(f, g)
        assert Done(v).map(g).map(f).run() == Done(v).map(h).run()

    def test_value(self):
        assert value(1) == Done(1)
        assert value(1).run() == 1

    def test_defer(self):
        calls = []
        t = defer(lambda: calls.append(1) or 'done')
        assert calls == []
        assert t.run() == 'done'
        assert calls == [1]

    def test_call(self):
        assert Call(lambda: Done(2)).map(str).run() == '2'

    def test_stack_safety(self):
        t = value(0)
        for _ in range(2000):
            t = t.and_then(lambda n: value(n + 1))
        with recursion_limit(200):
            assert t.run() == 2000
