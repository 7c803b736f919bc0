"""Identity layer: adds nothing, useful for naming a context."""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .base import Layer


@dataclass(frozen=True, slots=True)
class IdentityT:
    run: typing.Any


class IdentityLayer(Layer[IdentityT]):
    def pure(self, value: typing.Any, /) -> IdentityT:
        return IdentityT(self.inner.pure(value))

    def bind(self, m: IdentityT, f: Callable[[typing.Any], IdentityT], /) -> IdentityT:
        return IdentityT(self.inner.bind(m.run, lambda a: f(a).run))

    def lift(self, m: typing.Any, /) -> IdentityT:
        return IdentityT(m)

    def run(self, m: IdentityT, /) -> typing.Any:
        return m.run


__all__ = ("IdentityLayer", "IdentityT")
