"""
Core type definitions for scoped.

Shapes of the callbacks and primitives used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Continuation = what to do with the acquired value
type Continuation[A, R] = Callable[[A], Awaitable[R]]

# AcquireWith = "withXXX" primitive: acquire, run continuation, release
# NOTE: R is chosen per call, so the alias stays open over it.
type AcquireWith[A] = Callable[[Continuation[A, typing.Any]], Awaitable[typing.Any]]

# Bracketing = resource-less primitive: runs an action inside a bracket
type Bracketing = Callable[[Awaitable[typing.Any]], Awaitable[typing.Any]]

# Thunk = deferred async action (liftIO input)
type Thunk[T] = Callable[[], Awaitable[T]]


__all__ = (
    "AcquireWith",
    "Bracketing",
    "Continuation",
    "Thunk",
)
