import sys
from unittest.mock import patch

from hypothesis import assume, given

from mlist import compose, from_iterable, identity, map_m, to_tuple
from mlist.hypothesis_strategies import anything, ios, unaries
from mlist.io import IO, from_callable, get_line, io, put_line
from mlist.io import value as IO_

from .monad_test import MonadTest
from .utils import recursion_limit


def mock_input():
    return patch('mlist.io.input', create=True)


def mock_print():
    return patch('mlist.io.print', create=True)


class TestIO(MonadTest):
    @given(ios(anything()))
    def test_right_identity_law(self, action):
        assert action.and_then(IO_).run() == action.run()

    @given(anything(), unaries(ios(anything())))
    def test_left_identity_law(self, v, f):
        assert IO_(v).and_then(f).run() == f(v).run()

    @given(
        ios(anything()),
        unaries(ios(anything())),
        unaries(ios(anything()))
    )
    def test_associativity_law(self, action, f, g):
        assert action.and_then(f).and_then(g).run(
        ) == action.and_then(lambda x: f(x).and_then(g)).run()

    @given(ios(anything()), unaries(anything()), unaries(anything()))
    def test_composition_law(self, action, f, g):
        h = compose(f, g)
        assert action.map(h).run() == action.map(g).map(f).run()

    @given(anything())
    def test_equality(self, v):
        assert IO_(v).run() == IO_(v).run()

    @given(ios(anything()))
    def test_identity_law(self, action):
        assert action.map(identity).run() == action.run()

    @given(anything(), anything())
    def test_inequality(self, first, second):
        assume(first != second)
        assert IO_(first).run() != IO_(second).run()

    def test_get_line(self):
        with mock_input() as mocked_input:
            mocked_input.return_value = 'Hello'
            assert get_line().run() == 'Hello'

    def test_put_line(self):
        with mock_print() as mocked_print:
            put_line('Hello').run()
            mocked_print.assert_called_with('Hello', file=sys.stdout)

    def test_put_line_is_deferred(self):
        with mock_print() as mocked_print:
            action = put_line('Hello')
            mocked_print.assert_not_called()
            action.run()
            mocked_print.assert_called_once()

    def test_put_line_per_element(self):
        lines = from_iterable(IO_, ['a', 'b'])
        with mock_print() as mocked_print:
            action = map_m(IO_, put_line, lines)
            mocked_print.assert_not_called()
            action.and_then(to_tuple(IO_)).run()
            assert [c.args[0] for c in mocked_print.call_args_list] == [
                'a', 'b'
            ]

    def test_from_callable_runs_on_every_run(self):
        calls = []
        action = from_callable(lambda: calls.append(None) or len(calls))
        assert calls == []
        assert action.run() == 1
        assert action.run() == 2

    def test_io_decorator(self):
        calls = []

        @io
        def read(channel):
            calls.append(channel)
            return channel * 10

        action = read(2)
        assert isinstance(action, IO)
        assert calls == []
        assert action.run() == 20
        assert calls == [2]

    def test_stack_safety(self):
        action = IO_(0)
        for _ in range(2000):
            action = action.and_then(lambda n: IO_(n + 1))
        with recursion_limit(200):
            assert action.run() == 2000
