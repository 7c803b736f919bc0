"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from scoped import lift as L   # Recommended (balance)
    from scoped import lift as _   # Minimal
    from scoped import lift        # Explicit (for clarity)

Architecture:
- L.up.*    - building ScopedValue from primitives and context managers
- L.call()  - lifting async calls; L.wrap_async, L.scoped_call, L.scoping for the rest
- L.down.*  - running ScopedValue (acquire, run_scope)

Examples:
    from scoped import lift as L

    src = L.up.from_context_manager(lambda: open("in.txt"))
    dst = L.up.from_context_manager(lambda: open("out.txt", "w"))

    await L.down.run_scope(
        src.zip(dst).then(lambda pair: L.wrap_async(lambda: copy(*pair)))
    )
"""

from __future__ import annotations

from . import call as call_ns
from . import down as down_ns
from . import up as up_ns

# From up namespace - building
from .up import bracket, from_async_context_manager, from_context_manager, managed, managed_, pure

# From call namespace - lifting calls
from .call import call, lifted, scoped_call, scoping, wrap_async

# From down namespace - running
from .down import acquire, run_scope, with_many

up = up_ns
down = down_ns
# NOTE: L.call(func, *args) is the function; the module is reachable as L.call_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    "call_ns",
    # Up
    "pure",
    "managed",
    "managed_",
    "from_context_manager",
    "from_async_context_manager",
    "bracket",
    # Call
    "call",
    "lifted",
    "scoped_call",
    "scoping",
    "wrap_async",
    # Down
    "acquire",
    "run_scope",
    "with_many",
)
