"""@catching decorator: the function form of wrap_error."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from mprelude.either import Left, Right, normalize_kinds, wrap_error

__all__ = ['catching']

P = ParamSpec('P')
T = TypeVar('T')


def catching(
    *exceptions: type[BaseException],
) -> Callable[[Callable[P, T]], Callable[P, Left[BaseException] | Right[T]]]:
    """Decorator that routes every call of the wrapped function through wrap_error.

    The wrapped function returns Right(value) on success and Left(exc) when
    it raises one of the listed exception classes. Other exceptions
    propagate. The classifier set is mandatory, so bare `@catching` is
    rejected at decoration time.

    Works on plain functions, methods, static methods and class methods.

    Args:
        *exceptions: Exception classes to convert into Left.

    Returns:
        A decorator producing Either-returning callables.

    Raises:
        TypeError: If no exception classes are given, or an argument is not one.

    Example:
        ```python
        @catching(ZeroDivisionError)
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Right(value=5.0)
        divide(10, 0)
        # Left(value=ZeroDivisionError('division by zero'))
        ```
    """
    if not exceptions:
        msg = 'catching() requires at least one exception class'
        raise TypeError(msg)
    kinds = normalize_kinds(exceptions, 'catching')

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Left[BaseException] | Right[T]:
        return wrap_error(kinds, lambda: wrapped(*args, **kwargs))

    return wrapper
