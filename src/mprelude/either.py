"""Either type: Left[E] | Right[T] for computations that may fail.

Right carries a success value, Left carries a failure value. Combinators
over the success channel (fmap, bind) short-circuit on Left, and `lmap`
over the failure channel short-circuits on Right.

Example:
    ```python
    from mprelude import Either, Left, Right, wrap_error

    def parse_port(text: str) -> Either[str, int]:
        return (
            wrap_error({ValueError}, lambda: int(text))
            .lmap(lambda exc: f'not a number: {text!r}')
            .bind(lambda port: Right(port) if 0 < port < 65536 else Left(f'out of range: {port}'))
        )

    parse_port('8080').from_right()                 # 8080
    parse_port('http').either(str.upper, str)       # "NOT A NUMBER: 'HTTP'"
    parse_port('0').from_right(lambda err: 80)      # 80
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeIs

import msgspec

from mprelude._functor import require_callback
from mprelude._logging import get_logger
from mprelude.errors import WrongVariantError

__all__ = ['Either', 'ErrorKinds', 'Left', 'Right', 'wrap_error']

logger = get_logger(__name__)


# GC tracking stays on for Left and Right: exception payloads can form
# reference cycles through their tracebacks.
class Left[E](msgspec.Struct, frozen=True):
    """Failure variant of Either carrying a value of type E.

    Examples:
        >>> Left('boom').fmap(len)
        Left(value='boom')
        >>> Left('boom').lmap(str.upper)
        Left(value='BOOM')
        >>> Left('boom').from_right(len)
        4
    """

    value: E

    def is_left(self) -> TypeIs[Left[E]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> TypeIs[Right[object]]:
        """Return False since this is Left."""
        return False

    def fmap[T, U](self, f: Callable[[T], U] | None = None) -> Left[E]:
        """Return self without calling f.

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        require_callback(f, 'fmap')
        return self

    def bind[T, U](self, f: Callable[[T], Either[E, U]] | None = None) -> Left[E]:
        """Return self without calling f.

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        require_callback(f, 'bind')
        return self

    def lmap[F](self, f: Callable[[E], F] | None = None) -> Left[F]:
        """Apply a function to the failure value.

        Args:
            f: Function to apply. Called exactly once.

        Returns:
            Left containing f(value).

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        return Left(require_callback(f, 'lmap')(self.value))

    def from_left(self) -> E:
        """Return the failure value."""
        return self.value

    def from_right[T](self, default_fn: Callable[[E], T] | None = None) -> T:
        """Recover a success value from this failure.

        Args:
            default_fn: Fallback that receives the failure value.

        Returns:
            T: default_fn(value).

        Raises:
            WrongVariantError: If no fallback is supplied.
        """
        if default_fn is None:
            raise WrongVariantError('right', self)
        return default_fn(self.value)

    def either[R](
        self,
        on_left: Callable[[E], R] | None = None,
        on_right: Callable[[object], R] | None = None,
    ) -> R:
        """Dispatch to the left branch.

        Args:
            on_left: Called with the failure value.
            on_right: Never called, but must be supplied.

        Returns:
            R: on_left(value).

        Raises:
            MissingCallbackError: If either branch is not supplied.
        """
        branch = require_callback(on_left, 'either')
        require_callback(on_right, 'either')
        return branch(self.value)


class Right[T](msgspec.Struct, frozen=True):
    """Success variant of Either carrying a value of type T.

    Examples:
        >>> Right(2).fmap(lambda x: x + 1)
        Right(value=3)
        >>> Right(2).bind(lambda x: Left('odd') if x % 2 else Right(x))
        Right(value=2)
        >>> Right(2).either(repr, str)
        '2'
    """

    value: T

    def is_left(self) -> TypeIs[Left[object]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[T]]:
        """Return True since this is Right."""
        return True

    def fmap[U](self, f: Callable[[T], U] | None = None) -> Right[U]:
        """Apply a plain function to the success value.

        Args:
            f: Function to apply. Called exactly once.

        Returns:
            Right containing f(value).

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        return Right(require_callback(f, 'fmap')(self.value))

    def bind[E, U](self, f: Callable[[T], Either[E, U]] | None = None) -> Either[E, U]:
        """Apply a function that itself returns an Either.

        Args:
            f: Function from T to Either[E, U]. Called exactly once.

        Returns:
            Whatever f returned, never wrapped a second time.

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        return require_callback(f, 'bind')(self.value)

    def lmap[E, F](self, f: Callable[[E], F] | None = None) -> Right[T]:
        """Return self without calling f.

        Raises:
            MissingCallbackError: If f is not supplied.
        """
        require_callback(f, 'lmap')
        return self

    def from_left[E](self, default_fn: Callable[[T], E] | None = None) -> E:
        """Derive a failure value from this success.

        Args:
            default_fn: Fallback that receives the success value.

        Returns:
            E: default_fn(value).

        Raises:
            WrongVariantError: If no fallback is supplied.
        """
        if default_fn is None:
            raise WrongVariantError('left', self)
        return default_fn(self.value)

    def from_right(self) -> T:
        """Return the success value."""
        return self.value

    def either[R](
        self,
        on_left: Callable[[object], R] | None = None,
        on_right: Callable[[T], R] | None = None,
    ) -> R:
        """Dispatch to the right branch.

        Args:
            on_left: Never called, but must be supplied.
            on_right: Called with the success value.

        Returns:
            R: on_right(value).

        Raises:
            MissingCallbackError: If either branch is not supplied.
        """
        require_callback(on_left, 'either')
        return require_callback(on_right, 'either')(self.value)


type Either[E, T] = Left[E] | Right[T]

type ErrorKinds = type[BaseException] | Iterable[type[BaseException]]


def normalize_kinds(exceptions: ErrorKinds, operation: str = 'wrap_error') -> tuple[type[BaseException], ...]:
    """Turn a single exception class or a collection of them into an except-clause tuple.

    Raises:
        TypeError: If any entry is not a BaseException subclass.
    """
    kinds = (exceptions,) if isinstance(exceptions, type) else tuple(exceptions)
    for kind in kinds:
        if not (isinstance(kind, type) and issubclass(kind, BaseException)):
            msg = f'{operation}() expects exception classes, got {kind!r}'
            raise TypeError(msg)
    return kinds


def wrap_error[T](
    exceptions: ErrorKinds,
    body: Callable[[], T] | None = None,
) -> Left[BaseException] | Right[T]:
    """Run body and classify its outcome as Right or Left.

    Exceptions that are instances of one of the given classes become a
    Left holding the exception object. Anything else propagates unchanged:
    it is outside the failure domain the caller declared.

    Args:
        exceptions: An exception class, or a set/tuple/list of them.
        body: Zero-argument callable to run.

    Returns:
        Right(body()) on normal return, Left(exc) for a classified exception.

    Raises:
        MissingCallbackError: If body is not supplied.
        TypeError: If exceptions contains something other than exception classes.

    Example:
        ```python
        wrap_error({ArithmeticError}, lambda: 1 / 0)
        # Left(value=ZeroDivisionError('division by zero'))
        wrap_error({ArithmeticError}, lambda: 42)
        # Right(value=42)
        wrap_error({ArithmeticError}, lambda: {}['missing'])
        # raises KeyError
        ```
    """
    kinds = normalize_kinds(exceptions)
    thunk = require_callback(body, 'wrap_error')
    try:
        value = thunk()
    except kinds as exc:
        logger.debug(
            'wrap_error.caught',
            error_type=type(exc).__qualname__,
            classifiers=[kind.__qualname__ for kind in kinds],
        )
        return Left(exc)
    except Exception as exc:
        logger.debug('wrap_error.propagated', error_type=type(exc).__qualname__)
        raise
    return Right(value)
