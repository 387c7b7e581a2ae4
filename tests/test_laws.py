"""Property-based tests for the functor laws and unwrap laws across all variants."""

from hypothesis import given

from mprelude import Just, Left, Nothing, Right
from tests.strategies import functors, lefts, payloads, pure_functions, rights


def identity(value):
    return value


class TestFunctorLaws:
    """Functor laws hold for Just, Nothing, Left and Right alike."""

    @given(functors)
    def test_identity(self, x):
        """Identity: x.fmap(id) == x."""
        assert x.fmap(identity) == x

    @given(functors, pure_functions, pure_functions)
    def test_composition(self, x, f, g):
        """Composition: x.fmap(f).fmap(g) == x.fmap(g . f)."""
        assert x.fmap(f).fmap(g) == x.fmap(lambda v: g(f(v)))

    @given(payloads, pure_functions)
    def test_just_fmap(self, value, f):
        """Just(v).fmap(f) == Just(f(v))."""
        assert Just(value).fmap(f) == Just(f(value))

    @given(pure_functions)
    def test_nothing_fmap(self, f):
        """Nothing.fmap(f) == Nothing."""
        assert Nothing.fmap(f) is Nothing


class TestLmapLaws:
    """lmap is a functor over the failure channel."""

    @given(lefts, pure_functions, pure_functions)
    def test_left_composition(self, x, f, g):
        """Left: x.lmap(f).lmap(g) == x.lmap(g . f)."""
        assert x.lmap(f).lmap(g) == x.lmap(lambda v: g(f(v)))

    @given(rights, pure_functions)
    def test_right_lmap_is_noop(self, x, f):
        """Right: x.lmap(f) == x."""
        assert x.lmap(f) == x


class TestUnwrapLaws:
    """from_left/from_right agree with the carried value and fallbacks."""

    @given(payloads)
    def test_from_right(self, value):
        """Right(v).from_right() == v."""
        assert Right(value).from_right() == value

    @given(payloads)
    def test_from_left(self, value):
        """Left(e).from_left() == e."""
        assert Left(value).from_left() == value

    @given(payloads, pure_functions)
    def test_left_from_right_fallback(self, value, f):
        """Left(e).from_right(f) == f(e)."""
        assert Left(value).from_right(f) == f(value)

    @given(payloads, pure_functions)
    def test_right_from_left_fallback(self, value, f):
        """Right(v).from_left(f) == f(v)."""
        assert Right(value).from_left(f) == f(value)

    @given(payloads, pure_functions, pure_functions)
    def test_either_dispatch(self, value, f, g):
        """Left(e).either(f, g) == f(e) and Right(v).either(f, g) == g(v)."""
        assert Left(value).either(f, g) == f(value)
        assert Right(value).either(f, g) == g(value)
