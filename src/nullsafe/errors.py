"""Error types raised by the guard combinators."""

from __future__ import annotations

__all__ = ['AbsentValueError']


class AbsentValueError(ValueError):
    """A value that had to be present was absent.

    Raised by ``fail_if_absent`` when it is given a message instead of an
    exception, and by ``Nothing.unwrap()``.
    """

    def __init__(self, message: str = 'value is absent') -> None:
        self.message = message
        super().__init__(message)
