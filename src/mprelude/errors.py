"""Error types raised by mprelude itself.

Values carried inside a Left are never wrapped in these; they only signal
misuse of the combinator API.
"""

from __future__ import annotations

__all__ = [
    'MissingCallbackError',
    'PreludeError',
    'WrongVariantError',
]


class PreludeError(Exception):
    """Base class for all errors raised by mprelude."""


class MissingCallbackError(PreludeError, TypeError):
    """A combinator was called without the callback it requires.

    Raised on every variant, including the ones that would never invoke
    the callback, so that a forgotten argument is caught at the call site
    regardless of which variant happens to flow through it.
    """

    def __init__(self, operation: str, received: object = None) -> None:
        self.operation = operation
        self.received = received
        msg = f'{operation}() requires a callback'
        if received is not None:
            msg = f'{msg}, got {received!r}'
        super().__init__(msg)


class WrongVariantError(PreludeError, RuntimeError):
    """from_left()/from_right() was called on the opposite variant without a fallback."""

    def __init__(self, expected: str, actual: object) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f'Expected {expected} value, got {actual!r}')
