"""Reader layer: read-only environment shared by the whole computation."""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .base import Layer


@dataclass(frozen=True, slots=True)
class ReaderT:
    run: Callable[[typing.Any], typing.Any]


class ReaderLayer(Layer[ReaderT]):
    def pure(self, value: typing.Any, /) -> ReaderT:
        return ReaderT(lambda _: self.inner.pure(value))

    def bind(self, m: ReaderT, f: Callable[[typing.Any], ReaderT], /) -> ReaderT:
        return ReaderT(lambda env: self.inner.bind(m.run(env), lambda a: f(a).run(env)))

    def lift(self, m: typing.Any, /) -> ReaderT:
        return ReaderT(lambda _: m)

    def ask(self) -> ReaderT:
        return ReaderT(self.inner.pure)

    def asks(self, f: Callable[[typing.Any], typing.Any], /) -> ReaderT:
        return ReaderT(lambda env: self.inner.pure(f(env)))

    def local(self, f: Callable[[typing.Any], typing.Any], m: ReaderT, /) -> ReaderT:
        """Run m with a modified environment."""
        return ReaderT(lambda env: m.run(f(env)))

    def run(self, m: ReaderT, env: typing.Any, /) -> typing.Any:
        return m.run(env)


__all__ = ("ReaderLayer", "ReaderT")
