"""
Embedding ScopedValue into layered contexts.

Architecture:
- SupportsScope[M] - capability: a monad M that can embed ScopedValue
- ScopeContext     - native instance for ScopedValue itself (embed is identity)
- Layer[M]         - base for effect layers stacked over another SupportsScope

A layer only implements pure, bind and lift. Embedding is derived as
"embed in the inner context, then lift", so the capability travels through
stacks of any depth and order without per-combination code.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable, Generator
from functools import wraps

from .._types import Thunk
from ..core import ScopedValue
from ..lift.call import wrap_async


async def _unit() -> None:
    return None


class SupportsScope[M](abc.ABC):
    """
    Capability to embed a ScopedValue into the context M.

    All instances must obey:
    - embed(pure(x)) ≡ pure(x)
    - embed(m.then(f)) ≡ bind(embed(m), lambda x: embed(f(x)))
    """

    @abc.abstractmethod
    def pure(self, value: typing.Any, /) -> M:
        """Lift a plain value into M."""

    @abc.abstractmethod
    def bind(self, m: M, f: Callable[[typing.Any], M], /) -> M:
        """Monadic bind in M."""

    @abc.abstractmethod
    def embed[A](self, value: ScopedValue[A], /) -> M:
        """Run a ScopedValue inside M, keeping its resource held for the rest of M."""

    @abc.abstractmethod
    def lift_io(self, thunk: Thunk[typing.Any], /) -> M:
        """Run a plain async action inside M."""

    def map(self, m: M, f: Callable[[typing.Any], typing.Any], /) -> M:
        return self.bind(m, lambda a: self.pure(f(a)))

    def then_(self, m: M, n: M, /) -> M:
        """Sequence two computations, keeping the second result."""
        return self.bind(m, lambda _: n)

    def do[**P](
        self,
        genfn: Callable[P, Generator[M, typing.Any, typing.Any]],
    ) -> Callable[P, M]:
        """
        Generator-based do notation.

        Every `yield` binds a computation of this context and receives its
        value; the generator's return value is the result.

        Example:
            @SCOPE.do
            def copy():
                src = yield in_file("in.txt")
                dst = yield out_file("out.txt")
                yield L.wrap_async(lambda: transfer(src, dst))
                return dst.name

        NOTE: The generator is created when the computation runs, so the
              result can be executed many times. Generators are single-shot:
              continuations invoked more than once (ContLayer) are unsupported.
              Cleanup belongs in ScopedValues, not in try/finally inside the
              generator: failures are not thrown into it.
        """

        @wraps(genfn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> M:
            def start(_: None) -> M:
                return self._step(genfn(*args, **kwargs), None)

            # lift_io defers start() to execution time in every context
            return self.bind(self.lift_io(_unit), start)

        return wrapper

    def _step(self, gen: Generator[M, typing.Any, typing.Any], sent: typing.Any) -> M:
        try:
            m = gen.send(sent)
        except StopIteration as stop:
            return self.pure(stop.value)
        return self.bind(m, lambda a: self._step(gen, a))


class ScopeContext(SupportsScope[ScopedValue[typing.Any]]):
    """ScopedValue as its own context: embed is the identity."""

    def pure(self, value: typing.Any, /) -> ScopedValue[typing.Any]:
        return ScopedValue.pure(value)

    def bind(
        self,
        m: ScopedValue[typing.Any],
        f: Callable[[typing.Any], ScopedValue[typing.Any]],
        /,
    ) -> ScopedValue[typing.Any]:
        return m.then(f)

    def embed[A](self, value: ScopedValue[A], /) -> ScopedValue[A]:
        return value

    def lift_io(self, thunk: Thunk[typing.Any], /) -> ScopedValue[typing.Any]:
        return wrap_async(thunk)

    def __repr__(self) -> str:
        return "SCOPE"


SCOPE = ScopeContext()


class Layer[M](SupportsScope[M]):
    """
    Effect layer stacked over an inner SupportsScope.

    Subclasses implement pure, bind and lift (run an inner computation and
    reinterpret its result at this layer). embed and lift_io come for free.
    """

    inner: SupportsScope[typing.Any]

    def __init__(self, inner: SupportsScope[typing.Any] = SCOPE) -> None:
        self.inner = inner

    @abc.abstractmethod
    def lift(self, m: typing.Any, /) -> M:
        """Run an inner computation at this layer."""

    def embed[A](self, value: ScopedValue[A], /) -> M:
        return self.lift(self.inner.embed(value))

    def lift_io(self, thunk: Thunk[typing.Any], /) -> M:
        return self.lift(self.inner.lift_io(thunk))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


type LayerFactory = Callable[[SupportsScope[typing.Any]], SupportsScope[typing.Any]]


def stack(*layers: LayerFactory, base: SupportsScope[typing.Any] = SCOPE) -> SupportsScope[typing.Any]:
    """
    Build a layered context, innermost layer first.

    Example:
        ctx = stack(StateLayer, partial(WriterLayer, monoid=SUM))
        # WriterLayer(StateLayer(SCOPE))
    """
    ctx = base
    for layer in layers:
        ctx = layer(ctx)
    return ctx


__all__ = (
    "SCOPE",
    "Layer",
    "LayerFactory",
    "ScopeContext",
    "SupportsScope",
    "stack",
)
