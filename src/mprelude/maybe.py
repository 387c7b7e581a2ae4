"""Maybe type: Just[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeIs

import msgspec

from mprelude._functor import require_callback

__all__ = ['Just', 'Maybe', 'Nothing', 'NothingType']


# Just stays GC-tracked: its payload can point back at whatever holds it.
class Just[T](msgspec.Struct, frozen=True):
    """Just variant of Maybe carrying a value of type T.

    The value is not copied; Just only guarantees it will not rebind it.

    Examples:
        >>> Just(21).fmap(lambda x: x * 2)
        Just(value=42)
        >>> Just(21).bind(lambda x: Just(x * 2) if x > 0 else Nothing)
        Just(value=42)
        >>> match Just('a'):
        ...     case Just(value):
        ...         print(value)
        a
    """

    value: T

    def is_just(self) -> TypeIs[Just[T]]:
        """Return True since this is Just."""
        return True

    def is_nothing(self) -> TypeIs[NothingType]:
        """Return False since this is Just."""
        return False

    def fmap[U](self, f: Callable[[T], U] | None = None) -> Just[U]:
        """Apply a plain function to the contained value.

        Args:
            f: Function to apply. Called exactly once.

        Returns:
            Just containing f(value).

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        return Just(require_callback(f, 'fmap')(self.value))

    def bind[U](self, f: Callable[[T], Maybe[U]] | None = None) -> Maybe[U]:
        """Apply a function that itself returns a Maybe.

        The result of f is returned as is, never wrapped a second time.

        Args:
            f: Function from T to Maybe[U]. Called exactly once.

        Returns:
            Whatever f returned.

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        return require_callback(f, 'bind')(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe representing an absent value.

    Use the `Nothing` constant rather than instantiating this class. Any
    NothingType() compares and hashes equal to it anyway.

    fmap and bind never run their callback here, but they still insist on
    being given one.

    Examples:
        >>> Nothing.fmap(lambda x: x * 2)
        NothingType()
        >>> Nothing.is_nothing()
        True
    """

    def is_just(self) -> TypeIs[Just[object]]:
        """Return False since this is Nothing."""
        return False

    def is_nothing(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def fmap[T, U](self, f: Callable[[T], U] | None = None) -> NothingType:
        """Return Nothing without calling f.

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        require_callback(f, 'fmap')
        return self

    def bind[T, U](self, f: Callable[[T], Maybe[U]] | None = None) -> NothingType:
        """Return Nothing without calling f.

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        require_callback(f, 'bind')
        return self


Nothing: NothingType = NothingType()
"""Shared instance representing the absence of a value."""


type Maybe[T] = Just[T] | NothingType
