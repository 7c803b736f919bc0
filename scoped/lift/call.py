"""
Lifting calls into ScopedValue.

Functions and decorators that turn async actions and `withXXX(..., callback)`
functions into ScopedValue at the call site.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable
from functools import wraps

from .._types import Continuation, Thunk
from ..core import ScopedValue, managed


def wrap_async[T](thunk: Thunk[T]) -> ScopedValue[T]:
    """
    Wrap a lazy async action (thunk) into ScopedValue (liftIO).

    **When to use:** Running an ordinary coroutine in the middle of a chain,
    with every resource acquired so far still held.

    Example:
        from scoped import lift as L

        copied = src.zip(dst).then(
            lambda pair: L.wrap_async(lambda: copy(*pair))
        )

    NOTE: thunk must be a zero-arg callable for laziness.
          A bare coroutine would be consumed by the first execution.
    """

    async def acquire_with(k: Continuation[T, typing.Any]) -> typing.Any:
        value = await thunk()
        return await k(value)

    return managed(acquire_with)


def call[T, **P](
    func: Callable[P, Awaitable[T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> ScopedValue[T]:
    """
    Call async function with arguments and lift its result.

    Example:
        from scoped import lift as L

        user = L.call(fetch_user, 42)  # nothing runs until the scope is executed
    """
    return wrap_async(lambda: func(*args, **kwargs))


def lifted[T, **P](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, ScopedValue[T]]:
    """
    Decorator: async function now returns ScopedValue.

    Example:
        @L.lifted
        async def load_config(path: str) -> Config: ...

        config = load_config("app.toml")  # ScopedValue[Config]
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> ScopedValue[T]:
        return call(func, *args, **kwargs)

    return wrapper


def scoped_call[T](
    func: Callable[..., Awaitable[typing.Any]],
    *args: typing.Any,
    **kwargs: typing.Any,
) -> ScopedValue[T]:
    """
    Lift a `withXXX(*args, callback)` call.

    The callback is passed as the last positional argument.

    Example:
        async def with_tempdir(prefix: str, k): ...

        workdir = L.scoped_call(with_tempdir, "build-")
    """

    def acquire_with(k: Continuation[T, typing.Any]) -> Awaitable[typing.Any]:
        return func(*args, k, **kwargs)

    return managed(acquire_with)


def scoping[T](
    func: Callable[..., Awaitable[typing.Any]],
) -> Callable[..., ScopedValue[T]]:
    """
    Decorator form of `scoped_call`: drop the trailing callback parameter.

    Example:
        @L.scoping
        async def transaction(db: Database, k):
            async with db.begin() as tx:
                return await k(tx)

        tx = transaction(db)  # ScopedValue[Transaction]
    """

    @wraps(func)
    def wrapper(*args: typing.Any, **kwargs: typing.Any) -> ScopedValue[T]:
        return scoped_call(func, *args, **kwargs)

    return wrapper


__all__ = (
    "call",
    "lifted",
    "scoped_call",
    "scoping",
    "wrap_async",
)
