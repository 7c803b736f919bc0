"""
Continuation layer
==================

ContT.run takes the rest of the computation (a -> inner[r]) and produces
inner[r]. Embedded resources stay held while that rest runs.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .base import Layer


@dataclass(frozen=True, slots=True)
class ContT:
    run: Callable[[Callable[[typing.Any], typing.Any]], typing.Any]


class ContLayer(Layer[ContT]):
    def pure(self, value: typing.Any, /) -> ContT:
        return ContT(lambda k: k(value))

    def bind(self, m: ContT, f: Callable[[typing.Any], ContT], /) -> ContT:
        return ContT(lambda k: m.run(lambda a: f(a).run(k)))

    def lift(self, m: typing.Any, /) -> ContT:
        return ContT(lambda k: self.inner.bind(m, k))

    def call_cc(self, f: Callable[[Callable[[typing.Any], ContT]], ContT], /) -> ContT:
        """Call with current continuation: `f(exit)`, where exit(a) jumps out with a."""

        def run(k: Callable[[typing.Any], typing.Any]) -> typing.Any:
            def escape(a: typing.Any) -> ContT:
                return ContT(lambda _: k(a))

            return f(escape).run(k)

        return ContT(run)

    def run(self, m: ContT, k: Callable[[typing.Any], typing.Any], /) -> typing.Any:
        return m.run(k)

    def evaluate(self, m: ContT, /) -> typing.Any:
        """Finish with the inner pure."""
        return m.run(self.inner.pure)


__all__ = ("ContLayer", "ContT")
