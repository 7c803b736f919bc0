from __future__ import annotations

from _infra import FakePool, banner, run

from scoped import Log
from scoped.layers import ResultLayer, StateLayer, WriterLayer, stack
from kungfu import Error, Ok


async def main() -> None:
    banner("03_layered_context: embed a pool connection in Writer over Result over State")

    pool = FakePool("db")
    ctx = stack(StateLayer, ResultLayer, WriterLayer)
    result_layer = ctx.inner
    state_layer = result_layer.inner

    @ctx.do
    def job(limit: int):  # type: ignore[no-untyped-def]
        conn = yield ctx.embed(pool.connection())
        yield ctx.tell(Log.of(f"connected to {conn.name}"))
        for table in ("users", "orders", "events"):
            count = yield ctx.lift_io(lambda t=table: conn.execute(f"count {t}"))
            yield ctx.lift(result_layer.lift(state_layer.modify(lambda n, c=count: n + c)))
            yield ctx.tell(Log.of(f"{table}: {count}"))
        total = yield ctx.lift(result_layer.lift(state_layer.get()))
        if total > limit:
            yield ctx.lift(result_layer.throw(f"total {total} exceeds {limit}"))
        return total

    for limit in (10, 3):
        scoped_value = state_layer.run(result_layer.run(ctx.run(job(limit))), 0)

        async def report(outcome):  # type: ignore[no-untyped-def]
            result, state = outcome
            match result:
                case Ok((total, log)):
                    print(f"  ok: total={total} state={state} log={list(log)}")
                case Error(err):
                    print(f"  error: {err} state={state}")

        await scoped_value.use(report)


if __name__ == "__main__":
    run(main)
