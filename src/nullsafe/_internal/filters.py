"""Failure filters: decide which raised errors are captured as data.

A filter pairs the exception types handed to ``except`` with an optional
predicate consulted for each caught error. Errors outside ``catches``
are never touched; caught errors the predicate rejects are re-raised with
a bare ``raise`` so identity and traceback survive.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

__all__ = ['CAPTURE_ALL', 'FailureFilter', 'only', 'select', 'when']

type Outcome[T] = tuple[T | None, BaseException | None]


@dataclass(slots=True, frozen=True)
class FailureFilter:
    """Which failures a capture absorbs.

    Attributes:
        catches: Exception types intercepted at all.
        accepts: Optional predicate; a caught error it rejects is re-raised.
    """

    catches: tuple[type[BaseException], ...] = (Exception,)
    accepts: Callable[[BaseException], bool] | None = None

    def run[T](self, thunk: Callable[[], T]) -> Outcome[T]:
        """Call ``thunk`` and return ``(result, None)`` or ``(None, failure)``."""
        try:
            return thunk(), None
        except self.catches as e:
            if self.accepts is None or self.accepts(e):
                return None, e
            raise

    async def run_async[T](self, thunk: Callable[[], Awaitable[T]]) -> Outcome[T]:
        """Await ``thunk()`` with the same capture rules as ``run``."""
        try:
            return await thunk(), None
        except self.catches as e:
            if self.accepts is None or self.accepts(e):
                return None, e
            raise


CAPTURE_ALL = FailureFilter()


def when(predicate: Callable[[Any], bool]) -> FailureFilter:
    """Capture an ``Exception`` only if ``predicate(error)`` is true."""
    return FailureFilter(accepts=predicate)


def only(*types: type[BaseException]) -> FailureFilter:
    """Capture only instances of ``types``; an empty set captures nothing.

    Raises:
        TypeError: If an entry is not an exception class.
    """
    for t in types:
        if not (isinstance(t, type) and issubclass(t, BaseException)):
            msg = f'expected exception classes, got {t!r}'
            raise TypeError(msg)
    return FailureFilter(catches=tuple(types))


def select(
    when_: Callable[[Any], bool] | None = None,
    only_: tuple[type[BaseException], ...] | None = None,
) -> FailureFilter:
    """Build the filter for an optional predicate or type set (not both)."""
    if when_ is not None and only_ is not None:
        msg = 'pass either a predicate or a type set, not both'
        raise TypeError(msg)
    if when_ is not None:
        return when(when_)
    if only_ is not None:
        return only(*only_)
    return CAPTURE_ALL
