"""
Algebraic lifting
=================

Monoid and numeric structure on A carried over to ScopedValue[A].
Instances are explicit dataclasses of operations, not operator overloads.
"""

from .log import Log
from .monoid import ALL, ANY, LIST, LOG, PRODUCT, STRING, SUM, Monoid, lift_monoid, mconcat
from .numeric import (
    FLOAT,
    FRACTION,
    INT,
    Floating,
    Fractional,
    Num,
    lift_floating,
    lift_fractional,
    lift_num,
)

__all__ = (
    "Log",
    # Monoid
    "Monoid",
    "lift_monoid",
    "mconcat",
    "ALL",
    "ANY",
    "LIST",
    "LOG",
    "PRODUCT",
    "STRING",
    "SUM",
    # Numeric
    "Num",
    "Fractional",
    "Floating",
    "lift_num",
    "lift_fractional",
    "lift_floating",
    "INT",
    "FRACTION",
    "FLOAT",
)
