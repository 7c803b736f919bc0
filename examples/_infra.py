from __future__ import annotations

import asyncio
import sys
import typing
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from scoped import ScopedValue, managed  # noqa: E402


@dataclass(slots=True)
class FakeConnection:
    name: str
    closed: bool = False
    queries: list[str] = field(default_factory=list)

    async def execute(self, query: str) -> int:
        if self.closed:
            raise RuntimeError(f"{self.name}: connection is closed")
        self.queries.append(query)
        return len(self.queries)


@dataclass(slots=True)
class FakePool:
    """Hands out connections through a withXXX-style callback."""

    name: str
    delay_seconds: float = 0.0
    opened: int = 0

    async def with_connection(self, k: Callable[[FakeConnection], typing.Awaitable[typing.Any]]) -> typing.Any:
        await asyncio.sleep(self.delay_seconds)
        self.opened += 1
        conn = FakeConnection(f"{self.name}#{self.opened}")
        print(f"  open  {conn.name}")
        try:
            return await k(conn)
        finally:
            conn.closed = True
            print(f"  close {conn.name}")

    def connection(self) -> ScopedValue[FakeConnection]:
        return managed(self.with_connection)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
