"""Capture combinators: run a fallible step and get its outcome as data.

Two shapes of result, both ``Captured(value, failure)``:

- tap (``tap_capture*``): ``value`` is always the original input, the action
  only runs for its side effect.
- transform (``transform_capture*``): ``value`` is the transform's result on
  success, else the caller's default.

Each comes in three filter flavours:

- no suffix: every ``Exception`` is captured.
- ``_when``: captured only if a predicate accepts the error.
- ``_only``: captured only if the error is an instance of a listed type.

A failure the filter rejects is re-raised unchanged.

Example:
    ```python
    from nullsafe import tap_capture_only, transform_capture

    def check(x: int) -> None:
        if x < 0:
            raise ValueError(x)

    tap_capture_only(5, check, ValueError)   # Captured(value=5, failure=None)
    tap_capture_only(-5, check, ValueError)  # Captured(value=-5, failure=ValueError(-5))
    tap_capture_only(-5, check, KeyError)    # raises ValueError(-5)

    value, failure = transform_capture('12x', int, 0)
    # value == 0, failure is a ValueError
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import msgspec

from nullsafe._internal.filters import CAPTURE_ALL, FailureFilter, only, when
from nullsafe.option import Maybe, is_absent, payload_of

__all__ = [
    'Captured',
    'catch',
    'tap_capture',
    'tap_capture_only',
    'tap_capture_when',
    'transform_capture',
    'transform_capture_only',
    'transform_capture_when',
]


# gc stays on: a captured failure's traceback can reach back to this pair.
class Captured[T](msgspec.Struct, frozen=True):
    """Outcome of a capture combinator.

    Unpacks like a 2-tuple: ``value, failure = captured``.

    Attributes:
        value: The input (tap shape) or the result/default (transform shape).
        failure: The captured error, or None if nothing was captured.
    """

    value: T
    failure: BaseException | None = None

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.failure

    @property
    def failed(self) -> bool:
        """True if a failure was captured."""
        return self.failure is not None

    @property
    def succeeded(self) -> bool:
        """True if no failure was captured."""
        return self.failure is None


def _tap[V](value: V, action: Callable[[Any], Any], flt: FailureFilter) -> Captured[V]:
    if is_absent(value):
        return Captured(value)
    arg = payload_of(value)
    _, failure = flt.run(lambda: action(arg))
    return Captured(value, failure)


def _transform[T, U](value: Maybe[T], fn: Callable[[T], U], default: U, flt: FailureFilter) -> Captured[U]:
    if is_absent(value):
        return Captured(default)
    arg = payload_of(value)
    result, failure = flt.run(lambda: fn(arg))
    if failure is not None:
        return Captured(default, failure)
    return Captured(result)  # type: ignore[arg-type]


def tap_capture[V](value: V, action: Callable[[Any], Any]) -> Captured[V]:
    """Run ``action(payload)`` and capture any ``Exception`` it raises.

    Args:
        value: The value that may be absent. On absence ``action`` is not
            called and ``Captured(value, None)`` is returned.
        action: Side-effecting callable; its return value is ignored.

    Returns:
        ``Captured(value, None)`` on success, ``Captured(value, error)`` on failure.
    """
    return _tap(value, action, CAPTURE_ALL)


def tap_capture_when[V](
    value: V,
    action: Callable[[Any], Any],
    predicate: Callable[[Exception], bool],
) -> Captured[V]:
    """Like ``tap_capture`` but only captures errors ``predicate`` accepts.

    Raises:
        Exception: The original error, if ``predicate`` rejects it.
    """
    return _tap(value, action, when(predicate))


def tap_capture_only[V](
    value: V,
    action: Callable[[Any], Any],
    *types: type[BaseException],
) -> Captured[V]:
    """Like ``tap_capture`` but only captures instances of ``types``.

    Raises:
        BaseException: The original error, if it matches none of ``types``.
        TypeError: If an entry of ``types`` is not an exception class.
    """
    return _tap(value, action, only(*types))


def transform_capture[T, U](value: Maybe[T], fn: Callable[[T], U], default: U) -> Captured[U]:
    """Return ``fn(payload)`` as data, capturing any ``Exception`` it raises.

    Args:
        value: The value that may be absent. On absence ``fn`` is not called
            and ``Captured(default, None)`` is returned.
        fn: The transform.
        default: Result reported on absence or failure. A partially computed
            result is never returned.

    Returns:
        ``Captured(fn(payload), None)`` or ``Captured(default, error)``.
    """
    return _transform(value, fn, default, CAPTURE_ALL)


def transform_capture_when[T, U](
    value: Maybe[T],
    fn: Callable[[T], U],
    default: U,
    predicate: Callable[[Exception], bool],
) -> Captured[U]:
    """Like ``transform_capture`` but only captures errors ``predicate`` accepts.

    Raises:
        Exception: The original error, if ``predicate`` rejects it.
    """
    return _transform(value, fn, default, when(predicate))


def transform_capture_only[T, U](
    value: Maybe[T],
    fn: Callable[[T], U],
    default: U,
    *types: type[BaseException],
) -> Captured[U]:
    """Like ``transform_capture`` but only captures instances of ``types``.

    Raises:
        BaseException: The original error, if it matches none of ``types``.
        TypeError: If an entry of ``types`` is not an exception class.
    """
    return _transform(value, fn, default, only(*types))


def catch[T](captured: Captured[T], handler: Callable[[BaseException], Any] | None = None) -> T:
    """Handle a captured failure and return the pair's value.

    Args:
        captured: A capture combinator's result.
        handler: Called with the failure if one was captured.

    Returns:
        ``captured.value`` whether or not a failure was present.
    """
    if captured.failure is not None and handler is not None:
        handler(captured.failure)
    return captured.value
