"""
Running ScopedValue.

Entry points that execute a description: every resource is acquired and
released before these return.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable, Iterable
from functools import partial

from .._helpers import done
from .._types import Continuation
from ..collection.traverse import traverse
from ..core import ScopedValue, managed

logger = logging.getLogger(__name__)


async def acquire[A, R](value: ScopedValue[A], continuation: Continuation[A, R]) -> R:
    """
    Acquire a ScopedValue and run `continuation` with it.

    **When to use:** The fundamental evaluator. The resource is valid only
    inside `continuation`; do not let it escape.

    Example:
        from scoped import lift as L

        size = await L.down.acquire(in_file("data.csv"), count_lines)

    **Grammar:** `await L.down.acquire(value, continuation)` reads as "run down acquiring value"
    """
    return await value.use(continuation)


async def run_scope(value: ScopedValue[None]) -> None:
    """
    Run a scope to completion, enforcing that no acquired resource leaks.

    Returns only after every resource acquired during the run is released.

    Example:
        from scoped import lift as L

        await L.down.run_scope(
            in_file("in.txt").zip(out_file("out.txt")).then(
                lambda pair: L.wrap_async(lambda: copy(*pair))
            )
        )
    """
    logger.debug("running %r", value)
    await value.use(done)
    logger.debug("released %r", value)


async def with_many[T, B, R](
    f: Callable[[T, Continuation[B, typing.Any]], Awaitable[typing.Any]],
    items: Iterable[T],
    continuation: Continuation[list[B], R],
) -> R:
    """
    Acquire one resource per item with `f(item, callback)`, hand all of them
    to `continuation` at once, release in reverse order.

    Example:
        await L.down.with_many(with_file, paths, merge_all)
    """
    return await acquire(traverse(items, lambda item: managed(partial(f, item))), continuation)


__all__ = (
    "acquire",
    "run_scope",
    "with_many",
)
