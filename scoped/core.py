"""ScopedValue

Composable description of a scoped resource: "acquire it, run a continuation
with it, release it, even on failure".

Wraps any `withXXX`-shaped async primitive

    async def with_xxx(continuation: Callable[[A], Awaitable[R]]) -> R

and translates sequencing into nested callbacks, so several resources can be
acquired one after another without hand-written nesting.

A ScopedValue is inert: building or composing one acquires nothing. The
resource exists only while `use` runs, and only for the dynamic extent of the
continuation passed to it."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine

from ._errors import ContinuationNotInvokedError
from ._types import AcquireWith, Bracketing, Continuation


class ScopedValue[A]:
    """A resource of type A that is only reachable through a continuation.

    Release discipline is inherited from the wrapped primitive: every
    combinator nests continuations and never adds or drops an acquisition.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_acquire_with",)

    def __init__(self, acquire_with: AcquireWith[A], /) -> None:
        """Create ScopedValue from a `withXXX`-shaped primitive."""
        self._acquire_with = acquire_with

    @staticmethod
    def pure[V](value: V) -> ScopedValue[V]:
        """Embed a plain value: no acquisition, no release."""

        async def acquire_with(k: Continuation[V, typing.Any]) -> typing.Any:
            return await k(value)

        return ScopedValue(acquire_with)

    # Functor operations
    #
    # Combinators return the inner primitive's awaitable without awaiting it:
    # one frame per nesting level.

    def map[B](self, f: Callable[[A], B], /) -> ScopedValue[B]:
        """Functor fmap. The A-resource stays held until the continuation over B returns."""

        def acquire_with(k: Continuation[B, typing.Any]) -> Awaitable[typing.Any]:
            return self._acquire_with(lambda a: k(f(a)))

        return ScopedValue(acquire_with)

    # Applicative operations

    def ap[T, B](
        self: ScopedValue[Callable[[T], B]],
        other: ScopedValue[T],
        /,
    ) -> ScopedValue[B]:
        """
        Applicative apply (<*>).

        Acquires the function resource, then the argument resource, applies,
        and releases argument before function.
        """

        def acquire_with(k: Continuation[B, typing.Any]) -> Awaitable[typing.Any]:
            return self._acquire_with(lambda f: other._acquire_with(lambda x: k(f(x))))

        return ScopedValue(acquire_with)

    def zip_with[B, C](
        self,
        other: ScopedValue[B],
        f: Callable[[A, B], C],
        /,
    ) -> ScopedValue[C]:
        """
        liftA2: combine two independent resources with a binary function.

        Same nesting as `self.map(curried_f).ap(other)`, without the extra map level.
        """

        def acquire_with(k: Continuation[C, typing.Any]) -> Awaitable[typing.Any]:
            return self._acquire_with(lambda a: other._acquire_with(lambda b: k(f(a, b))))

        return ScopedValue(acquire_with)

    def zip[B](self, other: ScopedValue[B], /) -> ScopedValue[tuple[A, B]]:
        """Pair two independent resources."""
        return self.zip_with(other, lambda a, b: (a, b))

    # Monad operations

    def then[B](self, f: Callable[[A], ScopedValue[B]], /) -> ScopedValue[B]:
        """
        Monadic bind (>>=).

        - Acquires A, builds the next description from it
        - Acquires B while A is still held
        - Releases B, then A (LIFO), on every return path
        """

        def acquire_with(k: Continuation[B, typing.Any]) -> Awaitable[typing.Any]:
            return self._acquire_with(lambda a: f(a)._acquire_with(k))

        return ScopedValue(acquire_with)

    def then_[B](self, other: ScopedValue[B], /) -> ScopedValue[B]:
        """Sequence (>>): keep A held while B is in use, discard A's value."""
        return self.then(lambda _: other)

    # Evaluation

    async def use[R](self, k: Continuation[A, R], /) -> R:
        """
        Acquire the resource, run `k` with it, release it.

        Raises ContinuationNotInvokedError if execution returns without ever
        reaching `k`, i.e. some primitive along the chain skipped its
        continuation.
        """
        invoked = False

        async def continuation(a: A) -> R:
            nonlocal invoked
            invoked = True
            return await k(a)

        result = await self._acquire_with(continuation)
        if not invoked:
            raise ContinuationNotInvokedError(self._acquire_with)
        return result

    # Protocol methods

    def __call__[R](
        self,
        k: Continuation[A, R],
        /,
    ) -> Coroutine[typing.Any, typing.Any, R]:
        """Shorthand for `use`."""
        return self.use(k)

    def __repr__(self) -> str:
        return f"ScopedValue({self._acquire_with!r})"


# Constructors


def managed[A](acquire_with: AcquireWith[A], /) -> ScopedValue[A]:
    """
    Build a ScopedValue from an acquire-with-callback primitive.

    The primitive must release exactly once, including when the continuation
    raises. Nothing is added on top of that guarantee.

    Example:
        async def with_connection(k):
            conn = await pool.connect()
            try:
                return await k(conn)
            finally:
                await conn.close()

        connection = managed(with_connection)
    """
    return ScopedValue(acquire_with)


def managed_(bracketing: Bracketing, /) -> ScopedValue[None]:
    """
    Like `managed` but for resource-less brackets.

    `bracketing` receives the rest of the computation as an awaitable and must
    await it exactly once, e.g. "run this block with a lock held".
    """

    async def acquire_with(k: Continuation[None, typing.Any]) -> typing.Any:
        async def rest() -> typing.Any:
            return await k(None)

        action = rest()
        try:
            return await bracketing(action)
        finally:
            # No-op once awaited; silences "never awaited" if the bracket bailed out early.
            action.close()

    return ScopedValue(acquire_with)


__all__ = ("ScopedValue", "managed", "managed_")
