"""Presence combinators: branch on whether a value is set.

Each function takes a value that may be absent (``None``/``Nothing``) or
present (any other object, or ``Some(x)``), checks presence once, and
decides whether to call the supplied function. Caller functions always
receive the payload, never the ``Some`` wrapper. Where an absent value has
to be produced it mirrors the input: ``Nothing`` for Option inputs, ``None``
for bare ones.

Example:
    ```python
    from nullsafe import Nothing, Some, if_present, or_else

    if_present('hi', len, 0)   # 2
    if_present(None, len, 0)   # 0
    if_present(Some('hi'), len, 0)  # 2
    or_else(Nothing, 'fallback')  # 'fallback'
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, get_origin

from nullsafe.option import Maybe, NothingType, absent_like, is_absent, is_present, payload_of

__all__ = [
    'cast_to',
    'filter_if',
    'filter_if_not',
    'if_present',
    'if_present_do',
    'is_absent',
    'is_present',
    'map_or_absent',
    'or_else',
    'recover',
    'recover_with',
]

_ABSENT_LIKE_INPUT: Any = object()


def if_present[T, U](value: Maybe[T], fn: Callable[[T], U], default: U) -> U:
    """Apply ``fn`` to the payload if present, else return ``default``.

    Args:
        value: The value that may be absent.
        fn: Function applied to the payload; not called on absence.
        default: Returned when ``value`` is absent.

    Returns:
        ``fn(payload)`` or ``default``.
    """
    if is_absent(value):
        return default
    return fn(payload_of(value))


def if_present_do[V](value: V, action: Callable[[Any], Any]) -> V:
    """Call ``action`` with the payload for its side effect, then return ``value``.

    ``value`` is returned unchanged (same object) whether present or absent,
    so calls can be chained.
    """
    if is_present(value):
        action(payload_of(value))
    return value


def or_else[V, D](value: V, default: D) -> V | D:
    """Return ``value`` if present, otherwise ``default``.

    Nothing is invoked; ``default`` is returned exactly as given.
    """
    return default if is_absent(value) else value


def recover[V, D](value: V, supplier: Callable[[], D]) -> V | D:
    """Return ``value`` if present, otherwise call ``supplier()`` and return its result.

    ``supplier`` runs only on absence.
    """
    if is_absent(value):
        return supplier()
    return value


def recover_with[V, D](value: V, fallback: D) -> V | D:
    """Precomputed-fallback form of ``recover``."""
    return or_else(value, fallback)


def filter_if[V](value: V, predicate: Callable[[Any], bool]) -> V | NothingType | None:
    """Keep ``value`` if it is present and ``predicate(payload)`` holds.

    Returns:
        ``value`` unchanged, or the absent value matching its representation.
    """
    if is_present(value) and predicate(payload_of(value)):
        return value
    return absent_like(value)


def filter_if_not[V](value: V, predicate: Callable[[Any], bool]) -> V | NothingType | None:
    """Keep ``value`` if it is present and ``predicate(payload)`` does not hold."""
    if is_present(value) and not predicate(payload_of(value)):
        return value
    return absent_like(value)


def map_or_absent[T, U](
    value: Maybe[T],
    fn: Callable[[T], U],
    default: U | NothingType | None = _ABSENT_LIKE_INPUT,
) -> U | NothingType | None:
    """Apply an optional-returning ``fn`` to the payload if present.

    Like ``if_present`` but ``fn`` is expected to return a value that may
    itself be absent, and the default is optional.

    Args:
        value: The value that may be absent.
        fn: Function applied to the payload; its result is returned as-is.
        default: Returned on absence. When omitted, the absent value
            mirroring ``value`` (``Nothing`` or ``None``) is returned.

    Returns:
        ``fn(payload)``, ``default``, or the absent value.
    """
    if is_absent(value):
        return absent_like(value) if default is _ABSENT_LIKE_INPUT else default
    return fn(payload_of(value))


def cast_to[V](value: V, cls: type[Any] | tuple[type[Any], ...]) -> V | NothingType | None:
    """Return ``value`` if its payload is an instance of ``cls``, else the absent value.

    Subclasses match. Absent inputs stay absent. Parameterized generics are
    checked against their origin (``list[int]`` tests for ``list``); forms
    that cannot be checked at runtime, such as ``typing.Any``, never match.
    Never raises.

    Example:
        ```python
        cast_to(True, int)        # True
        cast_to('x', int)         # None
        cast_to(Some(1.5), float) # Some(value=1.5)
        cast_to(Some('x'), int)   # Nothing
        cast_to([1], list[int])   # [1]
        ```
    """
    if is_present(value) and _is_instance(payload_of(value), cls):
        return value
    return absent_like(value)


def _is_instance(obj: object, cls: Any) -> bool:
    if isinstance(cls, tuple):
        return any(_is_instance(obj, c) for c in cls)
    try:
        return isinstance(obj, cls)
    except TypeError:
        pass
    # list[int] and friends are checked against their origin
    origin = get_origin(cls)
    if origin is None:
        return False
    try:
        return isinstance(obj, origin)
    except TypeError:
        return False
