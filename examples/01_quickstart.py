from __future__ import annotations

import tempfile
from pathlib import Path

from _infra import banner, run

from scoped import lift as L


async def main() -> None:
    banner("01_quickstart: copy one file into another, no nesting")

    workdir = Path(tempfile.mkdtemp())
    source = workdir / "in.txt"
    source.write_text("hello, scoped\n")

    def in_file(path: Path):  # type: ignore[no-untyped-def]
        return L.up.from_context_manager(lambda: path.open("r"))

    def out_file(path: Path):  # type: ignore[no-untyped-def]
        return L.up.from_context_manager(lambda: path.open("w"))

    async def copy(src, dst) -> None:  # type: ignore[no-untyped-def]
        dst.write(src.read())

    scope = in_file(source).zip(out_file(workdir / "out.txt")).then(
        lambda pair: L.wrap_async(lambda: copy(*pair))
    )

    await L.down.run_scope(scope)
    print((workdir / "out.txt").read_text(), end="")


if __name__ == "__main__":
    run(main)
