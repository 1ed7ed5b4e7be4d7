from hypothesis import assume, given

from mlist import compose, identity
from mlist.hypothesis_strategies import anything, maybes, unaries
from mlist.maybe import Just, Nothing, from_optional

from .monad_test import MonadTest


class TestMaybe(MonadTest):
    @given(anything())
    def test_equality(self, v):
        assert Just(v) == Just(v)
        assert Nothing() == Nothing()

    @given(anything(), anything())
    def test_inequality(self, first, second):
        assume(first != second)
        assert Just(first) != Just(second)
        assert Just(first) != Nothing()

    @given(maybes(anything()))
    def test_identity_law(self, maybe):
        assert maybe.map(identity) == maybe

    @given(maybes(anything()), unaries(anything()), unaries(anything()))
    def test_composition_law(self, maybe, f, g):
        h = compose(f, g)
        assert maybe.map(h) == maybe.map(g).map(f)

    @given(maybes(anything()))
    def test_right_identity_law(self, maybe):
        assert maybe.and_then(Just) == maybe

    @given(anything(), unaries(maybes(anything())))
    def test_left_identity_law(self, v, f):
        assert Just(v).and_then(f) == f(v)

    @given(
        maybes(anything()),
        unaries(maybes(anything())),
        unaries(maybes(anything()))
    )
    def test_associativity_law(self, maybe, f, g):
        assert maybe.and_then(f).and_then(g) == maybe.and_then(
            lambda x: f(x).and_then(g)
        )

    @given(anything(), anything())
    def test_or_else(self, v, default):
        assert Just(v).or_else(default) == v
        assert Nothing().or_else(default) == default

    def test_bool(self):
        assert Just(0)
        assert not Nothing()

    def test_from_optional(self):
        assert from_optional(1) == Just(1)
        assert from_optional(None) == Nothing()
