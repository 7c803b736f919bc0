"""
Numeric lifting through ScopedValue
===================================

Arithmetic on ScopedValue[A] defined pointwise from arithmetic on A:
- constants lift through pure
- unary operations lift through map
- binary operations lift through zip_with

The lifted operations are the underlying ones run inside the scope, so they
obey whatever laws the underlying operations obey.
"""

from __future__ import annotations

import math
import operator
import typing
from collections.abc import Callable
from dataclasses import dataclass, fields
from fractions import Fraction

from ..core import ScopedValue


@dataclass(frozen=True, slots=True)
class Num[A]:
    """Ring-like operations (Haskell's Num)."""

    add: Callable[[A, A], A]
    sub: Callable[[A, A], A]
    mul: Callable[[A, A], A]
    negate: Callable[[A], A]
    abs: Callable[[A], A]
    signum: Callable[[A], A]
    from_integer: Callable[[int], A]


@dataclass(frozen=True, slots=True)
class Fractional[A](Num[A]):
    """Num plus division."""

    div: Callable[[A, A], A]
    recip: Callable[[A], A]
    from_rational: Callable[[Fraction], A]


@dataclass(frozen=True, slots=True)
class Floating[A](Fractional[A]):
    """Fractional plus transcendental functions."""

    pi: A
    exp: Callable[[A], A]
    sqrt: Callable[[A], A]
    log: Callable[[A], A]
    sin: Callable[[A], A]
    cos: Callable[[A], A]
    tan: Callable[[A], A]
    asin: Callable[[A], A]
    acos: Callable[[A], A]
    atan: Callable[[A], A]
    sinh: Callable[[A], A]
    cosh: Callable[[A], A]
    tanh: Callable[[A], A]
    asinh: Callable[[A], A]
    acosh: Callable[[A], A]
    atanh: Callable[[A], A]
    pow: Callable[[A, A], A]
    log_base: Callable[[A, A], A]


# Lifting

_UNARY = frozenset({
    "negate", "abs", "signum", "recip",
    "exp", "sqrt", "log", "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
})
_BINARY = frozenset({"add", "sub", "mul", "div", "pow", "log_base"})
_CONVERSIONS = frozenset({"from_integer", "from_rational"})
_CONSTANTS = frozenset({"pi"})


def _lift1[A, B](f: Callable[[A], B]) -> Callable[[ScopedValue[A]], ScopedValue[B]]:
    return lambda x: x.map(f)


def _lift2[A, B, C](
    f: Callable[[A, B], C],
) -> Callable[[ScopedValue[A], ScopedValue[B]], ScopedValue[C]]:
    return lambda x, y: x.zip_with(y, f)


def _lift_conversion[T, A](f: Callable[[T], A]) -> Callable[[T], ScopedValue[A]]:
    return lambda n: ScopedValue.pure(f(n))


def _lifted_fields(instance: Num[typing.Any]) -> dict[str, typing.Any]:
    lifted: dict[str, typing.Any] = {}
    for field in fields(instance):
        op = getattr(instance, field.name)
        if field.name in _UNARY:
            lifted[field.name] = _lift1(op)
        elif field.name in _BINARY:
            lifted[field.name] = _lift2(op)
        elif field.name in _CONVERSIONS:
            lifted[field.name] = _lift_conversion(op)
        elif field.name in _CONSTANTS:
            lifted[field.name] = ScopedValue.pure(op)
        else:
            raise TypeError(f"don't know how to lift {type(instance).__name__}.{field.name}")
    return lifted


def lift_num[A](num: Num[A]) -> Num[ScopedValue[A]]:
    """Num over ScopedValue[A]. Only the Num part of richer instances is lifted."""
    lifted = _lifted_fields(num)
    return Num(**{f.name: lifted[f.name] for f in fields(Num)})


def lift_fractional[A](fractional: Fractional[A]) -> Fractional[ScopedValue[A]]:
    """Fractional over ScopedValue[A]."""
    lifted = _lifted_fields(fractional)
    return Fractional(**{f.name: lifted[f.name] for f in fields(Fractional)})


def lift_floating[A](floating: Floating[A]) -> Floating[ScopedValue[A]]:
    """Floating over ScopedValue[A]."""
    return Floating(**_lifted_fields(floating))


# Stock instances


def _signum(x: typing.Any) -> typing.Any:
    return (x > 0) - (x < 0)


def _float_signum(x: float) -> float:
    if math.isnan(x):
        return x
    return float(_signum(x))


INT: Num[int] = Num(
    add=operator.add,
    sub=operator.sub,
    mul=operator.mul,
    negate=operator.neg,
    abs=abs,
    signum=_signum,
    from_integer=int,
)

FRACTION: Fractional[Fraction] = Fractional(
    add=operator.add,
    sub=operator.sub,
    mul=operator.mul,
    negate=operator.neg,
    abs=abs,
    signum=lambda x: Fraction(_signum(x)),
    from_integer=Fraction,
    div=operator.truediv,
    recip=lambda x: 1 / x,
    from_rational=Fraction,
)

FLOAT: Floating[float] = Floating(
    add=operator.add,
    sub=operator.sub,
    mul=operator.mul,
    negate=operator.neg,
    abs=abs,
    signum=_float_signum,
    from_integer=float,
    div=operator.truediv,
    recip=lambda x: 1.0 / x,
    from_rational=float,
    pi=math.pi,
    exp=math.exp,
    sqrt=math.sqrt,
    log=math.log,
    sin=math.sin,
    cos=math.cos,
    tan=math.tan,
    asin=math.asin,
    acos=math.acos,
    atan=math.atan,
    sinh=math.sinh,
    cosh=math.cosh,
    tanh=math.tanh,
    asinh=math.asinh,
    acosh=math.acosh,
    atanh=math.atanh,
    pow=operator.pow,
    # logBase b x
    log_base=lambda base, x: math.log(x, base),
)

__all__ = (
    "FLOAT",
    "FRACTION",
    "INT",
    "Floating",
    "Fractional",
    "Num",
    "lift_floating",
    "lift_fractional",
    "lift_num",
)
