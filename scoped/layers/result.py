"""
Result layer
============

Errors with payload, as kungfu Result values. Like OptionLayer, a thrown
error travels the ordinary return path, so every embedded resource is still
released in LIFO order.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .base import Layer


@dataclass(frozen=True, slots=True)
class ResultT:
    """Inner computation producing Result[A, E]."""

    run: typing.Any


class ResultLayer(Layer[ResultT]):
    def pure(self, value: typing.Any, /) -> ResultT:
        return ResultT(self.inner.pure(Ok(value)))

    def bind(self, m: ResultT, f: Callable[[typing.Any], ResultT], /) -> ResultT:
        def step(result: Result[typing.Any, typing.Any]) -> typing.Any:
            match result:
                case Ok(value):
                    return f(value).run
                case Error(err):
                    return self.inner.pure(Error(err))

        return ResultT(self.inner.bind(m.run, step))

    def lift(self, m: typing.Any, /) -> ResultT:
        return ResultT(self.inner.map(m, Ok))

    def throw(self, error: typing.Any, /) -> ResultT:
        """Short-circuit with Error(error)."""
        return ResultT(self.inner.pure(Error(error)))

    def from_result(self, result: Result[typing.Any, typing.Any], /) -> ResultT:
        return ResultT(self.inner.pure(result))

    def catch(self, m: ResultT, handler: Callable[[typing.Any], ResultT], /) -> ResultT:
        """Recover from Error(e) with handler(e)."""

        def step(result: Result[typing.Any, typing.Any]) -> typing.Any:
            match result:
                case Ok(_):
                    return self.inner.pure(result)
                case Error(err):
                    return handler(err).run

        return ResultT(self.inner.bind(m.run, step))

    def run(self, m: ResultT, /) -> typing.Any:
        """Inner computation of Result[A, E]."""
        return m.run


__all__ = ("ResultLayer", "ResultT")
