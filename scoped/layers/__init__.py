"""
Layered contexts
================

SupportsScope instances for ScopedValue itself and for every standard effect
layer. Layers stack in any order:

    from functools import partial
    from scoped.layers import ResultLayer, StateLayer, WriterLayer, stack

    ctx = stack(StateLayer, ResultLayer)       # ResultLayer(StateLayer(SCOPE))
    handle = ctx.embed(in_file("data.csv"))    # held until the stack finishes
"""

from .base import SCOPE, Layer, LayerFactory, ScopeContext, SupportsScope, stack
from .cont import ContLayer, ContT
from .identity import IdentityLayer, IdentityT
from .option import OptionLayer, OptionT
from .reader import ReaderLayer, ReaderT
from .result import ResultLayer, ResultT
from .rws import RWSLayer, RWST
from .state import StateLayer, StateT
from .writer import WriterLayer, WriterT

__all__ = (
    # Capability
    "SupportsScope",
    "ScopeContext",
    "SCOPE",
    "Layer",
    "LayerFactory",
    "stack",
    # Layers
    "ContLayer",
    "ContT",
    "IdentityLayer",
    "IdentityT",
    "OptionLayer",
    "OptionT",
    "ReaderLayer",
    "ReaderT",
    "ResultLayer",
    "ResultT",
    "RWSLayer",
    "RWST",
    "StateLayer",
    "StateT",
    "WriterLayer",
    "WriterT",
)
