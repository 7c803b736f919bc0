"""
Lifting resources into ScopedValue.

Constructors that turn acquisition primitives, context managers and explicit
acquire/release pairs into composable ScopedValue descriptions.
"""

from __future__ import annotations

import contextlib
import logging
import typing
from collections.abc import Awaitable, Callable

from .._types import Continuation, Thunk
from ..core import ScopedValue, managed, managed_

logger = logging.getLogger(__name__)


def pure[T](value: T) -> ScopedValue[T]:
    """
    Lift plain value into a ScopedValue that owns nothing.

    **When to use:** Starting a chain, or returning a computed value from a
    `then` callback.

    Example:
        from scoped import lift as L

        answer = L.up.pure(42)
        await L.down.acquire(answer, handle)  # handle(42)

    **Grammar:** `L.up.pure(value)` reads as "lift up pure value"
    """
    return ScopedValue.pure(value)


def from_context_manager[T](
    factory: Callable[[], contextlib.AbstractContextManager[T]],
) -> ScopedValue[T]:
    """
    Lift a synchronous context manager factory.

    **When to use:** `open`, `threading.Lock`, `tempfile.TemporaryDirectory`
    and anything else usable in a plain `with` statement.

    Example:
        from scoped import lift as L

        def in_file(path: str) -> ScopedValue[TextIO]:
            return L.up.from_context_manager(lambda: open(path))

    **Grammar:** `L.up.from_context_manager(factory)` reads as "lift up from context manager"

    NOTE: factory is called on every execution, so the description can be
          run any number of times, each with a fresh resource.
    """

    async def acquire_with(k: Continuation[T, typing.Any]) -> typing.Any:
        with factory() as resource:
            logger.debug("entered %r", resource)
            return await k(resource)

    return managed(acquire_with)


def from_async_context_manager[T](
    factory: Callable[[], contextlib.AbstractAsyncContextManager[T]],
) -> ScopedValue[T]:
    """
    Lift an asynchronous context manager factory.

    **When to use:** `asyncio.Lock`, async database sessions, HTTP clients.

    Example:
        from scoped import lift as L

        session = L.up.from_async_context_manager(lambda: httpx.AsyncClient())

    **Grammar:** `L.up.from_async_context_manager(factory)` reads as "lift up from async context manager"
    """

    async def acquire_with(k: Continuation[T, typing.Any]) -> typing.Any:
        async with factory() as resource:
            logger.debug("entered %r", resource)
            return await k(resource)

    return managed(acquire_with)


def bracket[T](
    acquire: Thunk[T],
    *,
    release: Callable[[T], Awaitable[None]],
) -> ScopedValue[T]:
    """
    Resource management: acquire → use → release (always).

    **When to use:** The resource has explicit open/close coroutines but no
    context manager.

    Example:
        from scoped import lift as L

        conn = L.up.bracket(pool.connect, release=lambda c: c.close())

    **Grammar:** `L.up.bracket(acquire, release=...)` reads as "lift up bracket"

    NOTE: If acquire raises, nothing was acquired and release is not called.
          Errors from release propagate; they are never suppressed.
    """

    async def acquire_with(k: Continuation[T, typing.Any]) -> typing.Any:
        resource = await acquire()
        try:
            return await k(resource)
        finally:
            await release(resource)

    return managed(acquire_with)


__all__ = (
    "pure",
    "managed",
    "managed_",
    "from_context_manager",
    "from_async_context_manager",
    "bracket",
)
