"""Guard combinators: turn absence or a bad state into an explicit error.

These are the only combinators that raise on purpose. The error is always
chosen by the caller at the call site and is never caught internally.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from nullsafe.errors import AbsentValueError
from nullsafe.option import Maybe, is_absent, is_present, payload_of

__all__ = ['fail_if', 'fail_if_absent']

type ErrorSpec = BaseException | Callable[[], BaseException]


def _materialize(error: ErrorSpec) -> BaseException:
    if isinstance(error, BaseException):
        return error
    built = error()
    if not isinstance(built, BaseException):
        msg = f'error factory must return an exception, got {built!r}'
        raise TypeError(msg)
    return built


def fail_if[V](value: V, predicate: Callable[[Any], bool], error: ErrorSpec) -> V:
    """Raise ``error`` if ``value`` is present and ``predicate(payload)`` holds.

    Args:
        value: The value to check. Absent values pass through untested.
        predicate: Condition describing the bad state.
        error: An exception instance, or a zero-argument factory such as an
            exception class. The factory is only called when raising, and
            must return an exception.

    Returns:
        ``value`` unchanged.

    Raises:
        BaseException: The caller-supplied error.
        TypeError: If a factory returns something that is not an exception.
    """
    if is_present(value) and predicate(payload_of(value)):
        raise _materialize(error)
    return value


def fail_if_absent[T](value: Maybe[T], error: ErrorSpec | str | None = None) -> T:
    """Return the payload of ``value``, raising if it is absent.

    Args:
        value: The value that must be present.
        error: What to raise on absence. A ``str`` becomes the message of an
            ``AbsentValueError``; an exception instance is raised as-is; a
            callable is called and its result raised. ``None`` raises a
            default ``AbsentValueError``.

    Returns:
        The payload (``Some`` is unwrapped).

    Raises:
        AbsentValueError: When ``error`` is a message or None.
        BaseException: The caller-supplied error otherwise.
        TypeError: If a factory returns something that is not an exception.

    Example:
        ```python
        fail_if_absent('x', 'boom')       # 'x'
        fail_if_absent(Some(0), 'boom')   # 0
        fail_if_absent(None, 'boom')      # AbsentValueError('boom')
        fail_if_absent(Nothing, KeyError) # KeyError()
        ```
    """
    if is_absent(value):
        if error is None:
            raise AbsentValueError
        if isinstance(error, str):
            raise AbsentValueError(error)
        raise _materialize(error)
    return payload_of(value)
