from __future__ import annotations

import asyncio
import typing

from _infra import FakePool, banner, run

from scoped import do, lift as L, managed_, run_scope, traced


def holding(lock: asyncio.Lock, name: str):  # type: ignore[no-untyped-def]
    """Resource-less bracket: run the rest of the scope with `lock` held."""

    async def with_lock(action: typing.Awaitable[typing.Any]) -> typing.Any:
        async with lock:
            print(f"  locked   {name}")
            try:
                return await action
            finally:
                print(f"  unlocked {name}")

    return managed_(with_lock)


async def main() -> None:
    banner("02_locks_and_pools: brackets, pools, tracing, do notation")

    primary = FakePool("primary")
    replica = FakePool("replica")
    migrations = asyncio.Lock()

    @do
    def migrate():  # type: ignore[no-untyped-def]
        yield holding(migrations, "migrations")
        write = yield traced(primary.connection(), name="primary")
        read = yield replica.connection()
        rows = yield L.call(read.execute, "select * from pending")
        yield L.call(write.execute, f"apply {rows} migrations")
        print(f"  applied on {write.name}, read from {read.name}")

    await run_scope(migrate())


if __name__ == "__main__":
    run(main)
