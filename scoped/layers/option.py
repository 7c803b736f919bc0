"""
Option layer
============

Optional failure: a computation either produces Some(value) or stops with
Nothing. Stopping is a value, not an exception, so resources embedded before
the stop are released on the ordinary return path.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Nothing, Option, Some

from .base import Layer


@dataclass(frozen=True, slots=True)
class OptionT:
    """Inner computation producing Option[A]."""

    run: typing.Any


class OptionLayer(Layer[OptionT]):
    def pure(self, value: typing.Any, /) -> OptionT:
        return OptionT(self.inner.pure(Some(value)))

    def bind(self, m: OptionT, f: Callable[[typing.Any], OptionT], /) -> OptionT:
        def step(option: Option[typing.Any]) -> typing.Any:
            match option:
                case Some(value):
                    return f(value).run
                case _:
                    return self.inner.pure(Nothing())

        return OptionT(self.inner.bind(m.run, step))

    def lift(self, m: typing.Any, /) -> OptionT:
        return OptionT(self.inner.map(m, Some))

    def nothing(self) -> OptionT:
        """Stop here with Nothing."""
        return OptionT(self.inner.pure(Nothing()))

    def from_option(self, option: Option[typing.Any], /) -> OptionT:
        return OptionT(self.inner.pure(option))

    def or_else(self, m: OptionT, alternative: Callable[[], OptionT], /) -> OptionT:
        """Run `alternative()` if m stopped with Nothing."""

        def step(option: Option[typing.Any]) -> typing.Any:
            match option:
                case Some(_):
                    return self.inner.pure(option)
                case _:
                    return alternative().run

        return OptionT(self.inner.bind(m.run, step))

    def run(self, m: OptionT, /) -> typing.Any:
        """Inner computation of Option[A]."""
        return m.run


__all__ = ("OptionLayer", "OptionT")
