"""
State layer
===========

Threads a state value through the computation: StateT.run maps a state to an
inner computation of (value, new_state).
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .base import Layer


@dataclass(frozen=True, slots=True)
class StateT:
    run: Callable[[typing.Any], typing.Any]


class StateLayer(Layer[StateT]):
    def pure(self, value: typing.Any, /) -> StateT:
        return StateT(lambda s: self.inner.pure((value, s)))

    def bind(self, m: StateT, f: Callable[[typing.Any], StateT], /) -> StateT:
        def run(s: typing.Any) -> typing.Any:
            return self.inner.bind(m.run(s), lambda pair: f(pair[0]).run(pair[1]))

        return StateT(run)

    def lift(self, m: typing.Any, /) -> StateT:
        return StateT(lambda s: self.inner.map(m, lambda a: (a, s)))

    # State operations

    def get(self) -> StateT:
        return StateT(lambda s: self.inner.pure((s, s)))

    def gets(self, f: Callable[[typing.Any], typing.Any], /) -> StateT:
        return StateT(lambda s: self.inner.pure((f(s), s)))

    def put(self, state: typing.Any, /) -> StateT:
        return StateT(lambda _: self.inner.pure((None, state)))

    def modify(self, f: Callable[[typing.Any], typing.Any], /) -> StateT:
        return StateT(lambda s: self.inner.pure((None, f(s))))

    # Running

    def run(self, m: StateT, state: typing.Any, /) -> typing.Any:
        """Inner computation of (value, final_state)."""
        return m.run(state)

    def evaluate(self, m: StateT, state: typing.Any, /) -> typing.Any:
        """Inner computation of the value only."""
        return self.inner.map(m.run(state), lambda pair: pair[0])

    def execute(self, m: StateT, state: typing.Any, /) -> typing.Any:
        """Inner computation of the final state only."""
        return self.inner.map(m.run(state), lambda pair: pair[1])


__all__ = ("StateLayer", "StateT")
