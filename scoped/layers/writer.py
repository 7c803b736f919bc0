"""
Writer layer
============

Accumulates output alongside the value with a monoid (Log by default).
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ..algebra.monoid import LOG, Monoid
from .base import SCOPE, Layer, SupportsScope


@dataclass(frozen=True, slots=True)
class WriterT:
    """Inner computation producing (value, output)."""

    run: typing.Any


class WriterLayer(Layer[WriterT]):
    monoid: Monoid[typing.Any]

    def __init__(
        self,
        inner: SupportsScope[typing.Any] = SCOPE,
        *,
        monoid: Monoid[typing.Any] = LOG,
    ) -> None:
        super().__init__(inner)
        self.monoid = monoid

    def pure(self, value: typing.Any, /) -> WriterT:
        return self.lift(self.inner.pure(value))

    def bind(self, m: WriterT, f: Callable[[typing.Any], WriterT], /) -> WriterT:
        def step(first: tuple[typing.Any, typing.Any]) -> typing.Any:
            value, written = first
            return self.inner.map(
                f(value).run,
                lambda second: (second[0], self.monoid.combine(written, second[1])),
            )

        return WriterT(self.inner.bind(m.run, step))

    def lift(self, m: typing.Any, /) -> WriterT:
        return WriterT(self.inner.map(m, lambda a: (a, self.monoid.empty)))

    # Writer operations

    def tell(self, output: typing.Any, /) -> WriterT:
        return WriterT(self.inner.pure((None, output)))

    def listen(self, m: WriterT, /) -> WriterT:
        """Also hand back what m wrote: value becomes (value, output)."""
        return WriterT(self.inner.map(m.run, lambda pair: (pair, pair[1])))

    def censor(self, m: WriterT, f: Callable[[typing.Any], typing.Any], /) -> WriterT:
        """Rewrite what m wrote."""
        return WriterT(self.inner.map(m.run, lambda pair: (pair[0], f(pair[1]))))

    # Running

    def run(self, m: WriterT, /) -> typing.Any:
        """Inner computation of (value, output)."""
        return m.run

    def execute(self, m: WriterT, /) -> typing.Any:
        """Inner computation of the output only."""
        return self.inner.map(m.run, lambda pair: pair[1])


__all__ = ("WriterLayer", "WriterT")
