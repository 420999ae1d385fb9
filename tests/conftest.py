"""Pytest configuration and shared fixtures for nullsafe tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class CallCounter:
    """Callable that records every argument it is invoked with."""

    def __init__(self, fn: Callable[..., Any] = lambda *_: None) -> None:
        self.fn = fn
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.fn(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter() -> Callable[..., CallCounter]:
    """Factory for call-counting wrappers around a function."""
    return CallCounter

