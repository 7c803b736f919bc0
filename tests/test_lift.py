"""Tests for the lift namespace: building, lifting calls, running."""

from __future__ import annotations

import asyncio
import contextlib
import threading
import typing
from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest

from conftest import Tracker, UseFailedError
from scoped import ScopedValue
from scoped import lift as L


async def _return(a: typing.Any) -> typing.Any:
    return a


class TestUp:
    """Tests for L.up constructors."""

    @pytest.mark.asyncio
    async def test_pure(self) -> None:
        """L.up.pure embeds a value."""
        assert await L.down.acquire(L.up.pure(1), _return) == 1

    @pytest.mark.asyncio
    async def test_from_context_manager_opens_and_closes(self, tmp_path: Path) -> None:
        """A file handle is open inside the scope and closed after."""
        path = tmp_path / "data.txt"
        path.write_text("hello")
        handles: list[typing.IO[str]] = []

        async def read(handle: typing.IO[str]) -> str:
            handles.append(handle)
            assert not handle.closed
            return handle.read()

        text = await L.down.acquire(L.up.from_context_manager(lambda: path.open()), read)

        assert text == "hello"
        assert handles[0].closed

    @pytest.mark.asyncio
    async def test_from_context_manager_calls_factory_per_run(self) -> None:
        """Each execution builds a fresh context manager."""
        calls: list[int] = []

        @contextlib.contextmanager
        def counter() -> Iterator[int]:
            calls.append(len(calls))
            yield len(calls)

        value = L.up.from_context_manager(counter)

        assert await L.down.acquire(value, _return) == 1
        assert await L.down.acquire(value, _return) == 2

    @pytest.mark.asyncio
    async def test_from_context_manager_releases_lock_on_error(self) -> None:
        """A threading.Lock is released even when the continuation fails."""
        lock = threading.Lock()

        async def explode(_: typing.Any) -> None:
            assert lock.locked()
            raise UseFailedError

        with pytest.raises(UseFailedError):
            await L.down.acquire(L.up.from_context_manager(lambda: lock), explode)

        assert not lock.locked()

    @pytest.mark.asyncio
    async def test_from_async_context_manager(self) -> None:
        """Async context managers are entered and exited around the continuation."""
        events: list[str] = []

        @contextlib.asynccontextmanager
        async def session() -> AsyncIterator[str]:
            events.append("open")
            try:
                yield "session"
            finally:
                events.append("close")

        async def use(s: str) -> str:
            events.append(f"use {s}")
            return s.upper()

        result = await L.down.acquire(L.up.from_async_context_manager(session), use)

        assert result == "SESSION"
        assert events == ["open", "use session", "close"]

    @pytest.mark.asyncio
    async def test_from_async_context_manager_with_asyncio_lock(self) -> None:
        """asyncio.Lock works as an async context manager."""
        lock = asyncio.Lock()

        async def check(_: typing.Any) -> bool:
            return lock.locked()

        assert await L.down.acquire(L.up.from_async_context_manager(lambda: lock), check)
        assert not lock.locked()

    @pytest.mark.asyncio
    async def test_bracket_releases_after_use(self) -> None:
        """bracket runs release after the continuation returns."""
        events: list[str] = []

        async def connect() -> str:
            events.append("connect")
            return "conn"

        async def close(conn: str) -> None:
            events.append(f"close {conn}")

        async def use(conn: str) -> None:
            events.append(f"use {conn}")

        await L.down.acquire(L.up.bracket(connect, release=close), use)

        assert events == ["connect", "use conn", "close conn"]

    @pytest.mark.asyncio
    async def test_bracket_skips_release_when_acquire_fails(self) -> None:
        """Nothing acquired means nothing released."""
        released: list[str] = []

        async def connect() -> str:
            raise ConnectionError("refused")

        async def close(conn: str) -> None:
            released.append(conn)

        with pytest.raises(ConnectionError):
            await L.down.acquire(L.up.bracket(connect, release=close), _return)

        assert released == []

    @pytest.mark.asyncio
    async def test_bracket_propagates_release_failure(self) -> None:
        """Release errors are not suppressed."""

        async def connect() -> str:
            return "conn"

        async def close(conn: str) -> None:
            raise OSError("close failed")

        with pytest.raises(OSError, match="close failed"):
            await L.down.acquire(L.up.bracket(connect, release=close), _return)


class TestCall:
    """Tests for lifting calls."""

    @pytest.mark.asyncio
    async def test_wrap_async_runs_inside_scope(self, tracker: Tracker) -> None:
        """The lifted action runs while earlier resources are held."""

        async def work() -> str:
            tracker.events.append("work")
            return "done"

        value, events = await tracker.observe(
            tracker.resource("a").then(lambda _: L.wrap_async(work))
        )

        assert value == "done"
        assert events == ["acquire a", "work", "use 'done'", "release a"]

    @pytest.mark.asyncio
    async def test_wrap_async_is_lazy(self) -> None:
        """Building with wrap_async does not run the thunk."""
        calls: list[None] = []

        async def work() -> None:
            calls.append(None)

        value = L.wrap_async(work)

        assert calls == []
        await L.down.run_scope(value)
        assert calls == [None]

    @pytest.mark.asyncio
    async def test_call_with_arguments(self) -> None:
        """L.call passes arguments through."""

        async def add(a: int, b: int, *, scale: int = 1) -> int:
            return (a + b) * scale

        assert await L.down.acquire(L.call(add, 1, 2, scale=10), _return) == 30

    @pytest.mark.asyncio
    async def test_lifted_decorator(self) -> None:
        """@lifted functions return ScopedValue."""

        @L.lifted
        async def double(x: int) -> int:
            return x * 2

        value = double(21)

        assert isinstance(value, ScopedValue)
        assert await L.down.acquire(value, _return) == 42

    @pytest.mark.asyncio
    async def test_scoped_call_appends_callback(self) -> None:
        """scoped_call lifts a withXXX(*args, callback) function."""
        events: list[str] = []

        async def with_prefix(prefix: str, k: typing.Any, *, suffix: str = "") -> typing.Any:
            events.append("open")
            try:
                return await k(f"{prefix}{suffix}")
            finally:
                events.append("close")

        result = await L.down.acquire(L.scoped_call(with_prefix, "tmp-", suffix="x"), _return)

        assert result == "tmp-x"
        assert events == ["open", "close"]

    @pytest.mark.asyncio
    async def test_scoping_decorator(self, tracker: Tracker) -> None:
        """@scoping turns withXXX into a ScopedValue factory usable in chains."""

        @L.scoping
        async def with_item(name: str, k: typing.Any) -> typing.Any:
            tracker.events.append(f"acquire {name}")
            try:
                return await k(name)
            finally:
                tracker.events.append(f"release {name}")

        value, events = await tracker.observe(with_item("x").then(lambda _: with_item("y")))

        assert value == "y"
        assert events == ["acquire x", "acquire y", "use 'y'", "release y", "release x"]


class TestDown:
    """Tests for entry points."""

    @pytest.mark.asyncio
    async def test_run_scope_returns_none_after_release(self, tracker: Tracker) -> None:
        """run_scope returns once everything is released."""
        result = await L.down.run_scope(tracker.resource("a").map(lambda _: None))

        assert result is None
        assert tracker.events == ["acquire a", "release a"]

    @pytest.mark.asyncio
    async def test_with_many_holds_all_resources(self, tracker: Tracker) -> None:
        """with_many gives the continuation every resource at once."""

        async def with_item(name: str, k: typing.Any) -> typing.Any:
            tracker.events.append(f"acquire {name}")
            try:
                return await k(name.upper())
            finally:
                tracker.events.append(f"release {name}")

        async def merge(items: list[str]) -> str:
            tracker.events.append(f"merge {items}")
            return "".join(items)

        result = await L.down.with_many(with_item, ["a", "b", "c"], merge)

        assert result == "ABC"
        assert tracker.events == [
            "acquire a",
            "acquire b",
            "acquire c",
            "merge ['A', 'B', 'C']",
            "release c",
            "release b",
            "release a",
        ]

    @pytest.mark.asyncio
    async def test_with_many_hundreds_of_items(self) -> None:
        """with_many handles several hundred items."""
        released: list[int] = []

        async def with_item(item: int, k: typing.Any) -> typing.Any:
            try:
                return await k(item)
            finally:
                released.append(item)

        async def total(items: list[int]) -> int:
            return sum(items)

        assert await L.down.with_many(with_item, range(300), total) == sum(range(300))
        assert released == list(reversed(range(300)))
