"""Internal helpers for scoped.

Not part of the public API."""

from __future__ import annotations

import typing


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


async def done(_: typing.Any) -> None:
    """Terminal continuation: accept a value and do nothing with it."""
    return None


__all__ = ("done", "identity")
