"""Callback validation shared by the Maybe and Either variants."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mprelude.errors import MissingCallbackError

__all__ = ['require_callback']


def require_callback[F: Callable[..., Any]](f: F | None, operation: str) -> F:
    """Return the callback unchanged, or raise if none was supplied.

    Short-circuiting variants call this and discard the result, so that
    `Nothing.fmap()` fails exactly like `Just(1).fmap()` does.

    Args:
        f: The callback passed to the combinator.
        operation: Name of the combinator, used in the error message.

    Returns:
        F: The callback itself.

    Raises:
        MissingCallbackError: If f is None or not callable.
    """
    if f is None or not callable(f):
        raise MissingCallbackError(operation, f)
    return f
