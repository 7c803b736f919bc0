"""Traverse combinators

Acquire one resource per item, nested in order, released in reverse."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Iterable

from .._helpers import identity
from .._types import Continuation
from ..core import ScopedValue, managed


def traverse[T, A](
    items: Iterable[T],
    handler: Callable[[T], ScopedValue[A]],
) -> ScopedValue[list[A]]:
    """
    Monadic map (mapM): T -> ScopedValue[A] over every item.

    Item N+1 is acquired inside the scope of item N, so all values are held at
    once when the continuation runs and released last-acquired first.

    NOTE: handler runs during execution, with every earlier item already held.
    """
    snapshot = tuple(items)

    def acquire_with(k: Continuation[list[A], typing.Any]) -> Awaitable[typing.Any]:
        def step(index: int, acquired: list[A]) -> Awaitable[typing.Any]:
            if index == len(snapshot):
                return k(acquired)
            # One continuation per item: the primitive's frame is the only one it adds
            return handler(snapshot[index])._acquire_with(
                lambda a: step(index + 1, [*acquired, a])
            )

        return step(0, [])

    return managed(acquire_with)


def sequence[A](values: Iterable[ScopedValue[A]]) -> ScopedValue[list[A]]:
    """Hold every ScopedValue at once: [ScopedValue[A]] -> ScopedValue[list[A]]."""
    return traverse(values, identity)


def replicate[A](n: int, value: ScopedValue[A]) -> ScopedValue[list[A]]:
    """Execute the same description n times, nested: n independent resources."""
    if n < 0:
        raise ValueError("replicate: n must be >= 0")
    return sequence([value] * n)


__all__ = ("replicate", "sequence", "traverse")
