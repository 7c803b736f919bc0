"""
RWS layer
=========

Reader, writer and state in one layer: RWST.run maps (env, state) to an
inner computation of (value, new_state, output).
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ..algebra.monoid import LOG, Monoid
from .base import SCOPE, Layer, SupportsScope


@dataclass(frozen=True, slots=True)
class RWST:
    run: Callable[[typing.Any, typing.Any], typing.Any]


class RWSLayer(Layer[RWST]):
    monoid: Monoid[typing.Any]

    def __init__(
        self,
        inner: SupportsScope[typing.Any] = SCOPE,
        *,
        monoid: Monoid[typing.Any] = LOG,
    ) -> None:
        super().__init__(inner)
        self.monoid = monoid

    def pure(self, value: typing.Any, /) -> RWST:
        return self.lift(self.inner.pure(value))

    def bind(self, m: RWST, f: Callable[[typing.Any], RWST], /) -> RWST:
        def run(env: typing.Any, s: typing.Any) -> typing.Any:
            def step(first: tuple[typing.Any, typing.Any, typing.Any]) -> typing.Any:
                value, state, written = first
                return self.inner.map(
                    f(value).run(env, state),
                    lambda second: (second[0], second[1], self.monoid.combine(written, second[2])),
                )

            return self.inner.bind(m.run(env, s), step)

        return RWST(run)

    def lift(self, m: typing.Any, /) -> RWST:
        return RWST(lambda env, s: self.inner.map(m, lambda a: (a, s, self.monoid.empty)))

    def _emit(self, f: Callable[[typing.Any, typing.Any], tuple[typing.Any, typing.Any, typing.Any]]) -> RWST:
        # f runs on execution, so every run gets its own monoid.empty
        return RWST(lambda env, s: self.inner.map(self.inner.pure(None), lambda _: f(env, s)))

    # Reader

    def ask(self) -> RWST:
        return self._emit(lambda env, s: (env, s, self.monoid.empty))

    def asks(self, f: Callable[[typing.Any], typing.Any], /) -> RWST:
        return self._emit(lambda env, s: (f(env), s, self.monoid.empty))

    def local(self, f: Callable[[typing.Any], typing.Any], m: RWST, /) -> RWST:
        return RWST(lambda env, s: m.run(f(env), s))

    # Writer

    def tell(self, output: typing.Any, /) -> RWST:
        return self._emit(lambda env, s: (None, s, output))

    # State

    def get(self) -> RWST:
        return self._emit(lambda env, s: (s, s, self.monoid.empty))

    def put(self, state: typing.Any, /) -> RWST:
        return self._emit(lambda env, s: (None, state, self.monoid.empty))

    def modify(self, f: Callable[[typing.Any], typing.Any], /) -> RWST:
        return self._emit(lambda env, s: (None, f(s), self.monoid.empty))

    # Running

    def run(self, m: RWST, env: typing.Any, state: typing.Any, /) -> typing.Any:
        """Inner computation of (value, final_state, output)."""
        return m.run(env, state)


__all__ = ("RWSLayer", "RWST")
