"""
Trace combinator
================

Observe when a scoped resource becomes available and when it is about to be
released, without touching its acquisition or release.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Literal

from .._types import Continuation
from ..core import ScopedValue, managed

logger = logging.getLogger(__name__)

type TracePhase = Literal["acquired", "releasing"]


@dataclass(frozen=True, slots=True)
class TraceEvent:
    """One step in the life of a traced resource."""

    name: str
    phase: TracePhase
    error: BaseException | None = None


@dataclass(frozen=True, slots=True)
class TracePolicy:
    """
    Tracing configuration.

    Events are logged on this module's logger at `level`; `on_event`, if set,
    receives every TraceEvent as well. If `on_event` raises while reporting a
    failed continuation, the continuation's error is the one propagated.
    """

    name: str
    level: int = logging.DEBUG
    on_event: Callable[[TraceEvent], None] | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TracePolicy.name must be non-empty")


def traced[A](
    value: ScopedValue[A],
    *,
    policy: TracePolicy | None = None,
    name: str | None = None,
) -> ScopedValue[A]:
    """
    Emit "acquired" once the resource is available and "releasing" once its
    continuation has finished (normally or with an error).

    Example:
        src = traced(in_file("in.txt"), name="src")
    """
    if policy is None:
        if name is None:
            raise ValueError("traced() needs either policy or name")
        policy = TracePolicy(name=name)
    elif name is not None:
        raise ValueError("traced() takes policy or name, not both")

    def emit(phase: TracePhase, error: BaseException | None = None) -> None:
        if error is None:
            logger.log(policy.level, "%s: %s", policy.name, phase)
        else:
            logger.log(policy.level, "%s: %s after %r", policy.name, phase, error)
        if policy.on_event is not None:
            policy.on_event(TraceEvent(policy.name, phase, error))

    def acquire_with(k: Continuation[A, typing.Any]) -> Awaitable[typing.Any]:
        async def continuation(resource: A) -> typing.Any:
            emit("acquired")
            try:
                result = await k(resource)
            except BaseException as exc:
                try:
                    emit("releasing", exc)
                except Exception:
                    # The continuation's error wins; the callback's is only logged.
                    logger.exception("%s: on_event failed while reporting %r", policy.name, exc)
                raise
            emit("releasing")
            return result

        return value._acquire_with(continuation)

    return managed(acquire_with)


__all__ = ("TraceEvent", "TracePhase", "TracePolicy", "traced")
