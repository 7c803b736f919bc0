"""
Monoids and their lifting through ScopedValue
=============================================

If A is a monoid, ScopedValue[A] is one too:
- empty: pure(empty_A)
- combine: zip_with(combine_A), both resources held while combining
"""

from __future__ import annotations

import functools
import operator
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..core import ScopedValue
from .log import Log


@dataclass(frozen=True, slots=True)
class Monoid[A]:
    """
    Identity element plus associative combine.

    `unit` builds the identity element; `empty` calls it, so every caller gets
    its own copy even when A is mutable (lists, dicts).

    Laws expected from every instance:
    - combine(empty, x) == x == combine(x, empty)
    - combine(combine(x, y), z) == combine(x, combine(y, z))
    """

    unit: Callable[[], A]
    combine: Callable[[A, A], A]

    @property
    def empty(self) -> A:
        """A fresh identity element."""
        return self.unit()


def mconcat[A](monoid: Monoid[A], values: Iterable[A]) -> A:
    """Fold values left to right, starting from empty."""
    return functools.reduce(monoid.combine, values, monoid.empty)


def lift_monoid[A](monoid: Monoid[A]) -> Monoid[ScopedValue[A]]:
    """Monoid over ScopedValue[A] derived from the monoid over A."""

    def unit() -> ScopedValue[A]:
        # identity built per execution, not per description
        return ScopedValue.pure(None).map(lambda _: monoid.empty)

    def combine(x: ScopedValue[A], y: ScopedValue[A]) -> ScopedValue[A]:
        return x.zip_with(y, monoid.combine)

    return Monoid(unit=unit, combine=combine)


# Stock instances

SUM: Monoid[typing.Any] = Monoid(unit=int, combine=operator.add)
PRODUCT: Monoid[typing.Any] = Monoid(unit=lambda: 1, combine=operator.mul)
STRING: Monoid[str] = Monoid(unit=str, combine=operator.add)
LIST: Monoid[list[typing.Any]] = Monoid(unit=list, combine=operator.add)
LOG: Monoid[Log[typing.Any]] = Monoid(unit=Log, combine=Log.combine)
ALL: Monoid[bool] = Monoid(unit=lambda: True, combine=operator.and_)
ANY: Monoid[bool] = Monoid(unit=bool, combine=operator.or_)

__all__ = (
    "ALL",
    "ANY",
    "LIST",
    "LOG",
    "PRODUCT",
    "STRING",
    "SUM",
    "Monoid",
    "lift_monoid",
    "mconcat",
)
