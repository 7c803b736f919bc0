"""
Composable scoped resources.

Acquire several "acquire, use, release" resources in sequence without nesting
one callback inside another, keeping each primitive's exception safety and
deterministic, last-in-first-out release.

Architecture:
- ScopedValue[A]  - inert description of a resource (core)
- lift            - building (L.up), lifting calls (L.call), running (L.down)
- collection      - traverse/sequence over many resources
- algebra         - monoid and numeric structure lifted to ScopedValue
- layers          - SupportsScope: embed ScopedValue in layered contexts
- control         - tracing
"""

# Core types
from ._types import AcquireWith, Bracketing, Continuation, Thunk
from .core import ScopedValue, managed, managed_

# Lift helpers
from . import lift
from .lift import (
    acquire,
    bracket,
    call,
    from_async_context_manager,
    from_context_manager,
    lifted,
    pure,
    run_scope,
    scoped_call,
    scoping,
    with_many,
    wrap_async,
)

# Collection operations
from .collection import replicate, sequence, traverse

# Algebraic lifting
from . import algebra
from .algebra import Log, Monoid, lift_floating, lift_fractional, lift_monoid, lift_num, mconcat

# Layered contexts
from . import layers
from .layers import SCOPE, SupportsScope, stack

# Control
from .control import TraceEvent, TracePolicy, traced

# Errors
from ._errors import ContinuationNotInvokedError, ScopeError

do = SCOPE.do

__all__ = (
    # Types
    "AcquireWith",
    "Bracketing",
    "Continuation",
    "Thunk",
    # Core
    "ScopedValue",
    "managed",
    "managed_",
    # Lift
    "lift",
    "acquire",
    "bracket",
    "call",
    "from_async_context_manager",
    "from_context_manager",
    "lifted",
    "pure",
    "run_scope",
    "scoped_call",
    "scoping",
    "with_many",
    "wrap_async",
    # Collection
    "replicate",
    "sequence",
    "traverse",
    # Algebra
    "algebra",
    "Log",
    "Monoid",
    "lift_floating",
    "lift_fractional",
    "lift_monoid",
    "lift_num",
    "mconcat",
    # Layers
    "layers",
    "SCOPE",
    "SupportsScope",
    "do",
    "stack",
    # Control
    "TraceEvent",
    "TracePolicy",
    "traced",
    # Errors
    "ContinuationNotInvokedError",
    "ScopeError",
)
