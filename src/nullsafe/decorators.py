"""@capturing and @capturing_async: capture combinators as decorators."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from nullsafe._internal.filters import select
from nullsafe.capture import Captured

__all__ = ['capturing', 'capturing_async']


@overload
def capturing[**P, T](func: Callable[P, T], /) -> Callable[P, Captured[T | None]]: ...


@overload
def capturing[**P, T](
    func: None = None,
    /,
    *,
    default: T | None = None,
    when: Callable[[Exception], bool] | None = None,
    only: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Captured[T | None]]]: ...


def capturing(
    func: Callable[..., Any] | None = None,
    /,
    *,
    default: Any = None,
    when: Callable[[Exception], bool] | None = None,
    only: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that makes a function return a transform-shaped ``Captured``.

    Each call returns ``Captured(result, None)`` on success or
    ``Captured(default, error)`` when a failure is captured. Failures the
    filter rejects propagate unchanged.

    Can be used with or without arguments:
        @capturing
        def risky(): ...

        @capturing(default=0, only=(ValueError,))
        def parse(text): ...

    Args:
        func: The function to wrap (when used without parentheses).
        default: Value reported when a failure is captured.
        when: Capture only errors this predicate accepts.
        only: Capture only instances of these exception types.

    Raises:
        TypeError: If both ``when`` and ``only`` are given.
    """
    flt = select(when, only)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Captured[Any]:
        result, failure = flt.run(lambda: wrapped(*args, **kwargs))
        if failure is not None:
            return Captured(default, failure)
        return Captured(result)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def capturing_async[**P, T](
    func: Callable[P, Awaitable[T]], /
) -> Callable[P, Awaitable[Captured[T | None]]]: ...


@overload
def capturing_async[**P, T](
    func: None = None,
    /,
    *,
    default: T | None = None,
    when: Callable[[Exception], bool] | None = None,
    only: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Captured[T | None]]]]: ...


def capturing_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    /,
    *,
    default: Any = None,
    when: Callable[[Exception], bool] | None = None,
    only: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async counterpart of ``capturing``.

    Example:
        ```python
        @capturing_async(default=b'', only=(TimeoutError,))
        async def fetch(url: str) -> bytes:
            return await http_get(url)

        body, failure = await fetch('https://example.org')
        ```
    """
    flt = select(when, only)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Captured[Any]:
        result, failure = await flt.run_async(lambda: wrapped(*args, **kwargs))
        if failure is not None:
            return Captured(default, failure)
        return Captured(result)

    if func is not None:
        return wrapper(func)
    return wrapper
