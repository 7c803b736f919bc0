"""Shared pytest fixtures for scoped tests."""

from __future__ import annotations

import typing
from dataclasses import dataclass, field

import pytest

from scoped import ScopedValue, managed, managed_


class AcquireFailedError(Exception):
    """Raised by a tracked resource that refuses to be acquired."""


class UseFailedError(Exception):
    """Raised from inside a continuation."""


@dataclass
class Tracker:
    """Builds resources that record their acquire/release events."""

    events: list[str] = field(default_factory=list)

    def resource(
        self,
        name: str,
        value: typing.Any = None,
        *,
        fail_acquire: bool = False,
    ) -> ScopedValue[typing.Any]:
        async def with_resource(k: typing.Any) -> typing.Any:
            self.events.append(f"acquire {name}")
            if fail_acquire:
                raise AcquireFailedError(name)
            try:
                return await k(name if value is None else value)
            finally:
                self.events.append(f"release {name}")

        return managed(with_resource)

    def bracketing(self, name: str) -> ScopedValue[None]:
        async def with_bracket(action: typing.Awaitable[typing.Any]) -> typing.Any:
            self.events.append(f"enter {name}")
            try:
                return await action
            finally:
                self.events.append(f"exit {name}")

        return managed_(with_bracket)

    async def observe(self, value: ScopedValue[typing.Any]) -> tuple[typing.Any, list[str]]:
        """Run value, recording when the continuation sees it; return (value, events)."""
        start = len(self.events)

        async def k(a: typing.Any) -> typing.Any:
            self.events.append(f"use {a!r}")
            return a

        result = await value.use(k)
        return result, self.events[start:]

    @property
    def acquired(self) -> int:
        return sum(1 for e in self.events if e.startswith("acquire "))

    @property
    def released(self) -> int:
        return sum(1 for e in self.events if e.startswith("release "))


@pytest.fixture()
def tracker() -> Tracker:
    """Fresh event tracker."""
    return Tracker()
