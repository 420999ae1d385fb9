"""Option type: Some[T] | Nothing, plus the bare-value presence rules.

Every combinator in nullsafe accepts either an explicit Option or a bare
value. A bare ``None`` is absent, any other bare object is present and is
its own payload. ``Some(None)`` is present; ``Nothing`` is absent.

Examples:
    >>> payload_of(Some(3))
    3
    >>> payload_of(3)
    3
    >>> absent_like(Some('x'))
    Nothing
    >>> absent_like('x') is None
    True
"""

from __future__ import annotations

from typing import Any, Never, NoReturn, TypeIs

import msgspec

from nullsafe.errors import AbsentValueError

__all__ = [
    'Maybe',
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'absent_like',
    'from_nullable',
    'is_absent',
    'is_present',
    'payload_of',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(None).is_some()
        True
    """

    value: T

    # forbid truthiness to avoid 'if opt:' footguns
    def __bool__(self) -> Never:
        raise TypeError('Option has no truth value; use is_present() / is_absent().')

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton in practice - use the `Nothing` constant instead of
    instantiating directly. All instances compare equal.
    """

    def __bool__(self) -> Never:
        raise TypeError('Option has no truth value; use is_present() / is_absent().')

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Raises:
            AbsentValueError: Always.
        """
        raise AbsentValueError('called unwrap() on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType

type Maybe[T] = Some[T] | NothingType | T | None
"""Anything a combinator accepts: an explicit Option or a nullable bare value."""


def is_absent(value: object) -> bool:
    """Return True if ``value`` is ``None`` or ``Nothing``.

    Falsy payloads such as ``0``, ``''`` or ``False`` are present.
    """
    return value is None or isinstance(value, NothingType)


def is_present(value: object) -> bool:
    """Return True if ``value`` is neither ``None`` nor ``Nothing``."""
    return not is_absent(value)


def payload_of[T](value: Maybe[T]) -> T:
    """Return what a caller-supplied function receives for ``value``.

    ``Some(x)`` unwraps to ``x``; everything else is returned as-is.
    """
    if isinstance(value, Some):
        return value.value
    return value  # type: ignore[return-value]


def absent_like(value: object) -> NothingType | None:
    """Return the absent value in the same representation as ``value``."""
    if isinstance(value, Some | NothingType):
        return Nothing
    return None


def from_nullable[T](value: T | None) -> Option[T]:
    """Convert a nullable bare value to an Option.

    Args:
        value: The value that may be None.

    Returns:
        Some(value) if value is not None, otherwise Nothing.
    """
    return Some(value) if value is not None else Nothing
