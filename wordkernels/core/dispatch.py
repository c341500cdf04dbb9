"""
Variant dispatch for the word kernels.

The kernels mutate `Word` slots in place. Callers holding plain ints use the
value-level wrappers here, which build the slots, run the selected variant and
return a frozen result. The `*_or_raise` forms additionally check the
registered invariants and raise `KernelInvariantError` on a violation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..kernels.python import minmax_u64, rotr3_u32
from .errors import KernelInvariantError
from .invariants import MinMaxObservation, Rotr3Observation, check_minmax, check_rotr3
from .words import U32_BITS, U64_BITS, Word, require_uint, u32, u64


MINMAX_VARIANTS: dict[str, Callable[[Word, Word], int]] = {
    "branch": minmax_u64.minmax,
    "xor": minmax_u64.minmax_xor,
    "ternary": minmax_u64.minmax_ternary,
}

ROTR3_VARIANTS: dict[str, Callable[[Word, Word, Word], None]] = {
    "naive": rotr3_u32.rotr3,
    "fixed": rotr3_u32.rotr3_fixed,
}

DEFAULT_MINMAX_VARIANT = "branch"
DEFAULT_ROTR3_VARIANT = "fixed"


@dataclass(frozen=True)
class MinMaxResult:
    lo: int
    hi: int
    cmp: int


@dataclass(frozen=True)
class Rotr3Result:
    x: int
    y: int
    z: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)


def _select(table: dict, variant: str, *, kind: str):
    try:
        return table[variant]
    except KeyError:
        raise ValueError(f"unsupported {kind} variant: {variant!r}") from None


def minmax_values(x: int, y: int, *, variant: str = DEFAULT_MINMAX_VARIANT) -> MinMaxResult:
    kernel = _select(MINMAX_VARIANTS, variant, kind="minmax")
    require_uint("x", x, U64_BITS)
    require_uint("y", y, U64_BITS)
    a, b = u64(x), u64(y)
    cmp = kernel(a, b)
    return MinMaxResult(lo=a.value, hi=b.value, cmp=cmp)


def rotr3_values(x: int, y: int, z: int, *, variant: str = DEFAULT_ROTR3_VARIANT) -> Rotr3Result:
    kernel = _select(ROTR3_VARIANTS, variant, kind="rotr3")
    require_uint("x", x, U32_BITS)
    require_uint("y", y, U32_BITS)
    require_uint("z", z, U32_BITS)
    a, b, c = u32(x), u32(y), u32(z)
    kernel(a, b, c)
    return Rotr3Result(x=a.value, y=b.value, z=c.value)


def minmax_or_raise(x: int, y: int, *, variant: str = DEFAULT_MINMAX_VARIANT) -> MinMaxResult:
    res = minmax_values(x, y, variant=variant)
    violations = check_minmax(MinMaxObservation(x=x, y=y, lo=res.lo, hi=res.hi, cmp=res.cmp))
    if violations:
        raise KernelInvariantError(violations)
    return res


def rotr3_or_raise(x: int, y: int, z: int, *, variant: str = DEFAULT_ROTR3_VARIANT) -> Rotr3Result:
    res = rotr3_values(x, y, z, variant=variant)
    violations = check_rotr3(Rotr3Observation(x=x, y=y, z=z, a=res.x, b=res.y, c=res.z))
    if violations:
        raise KernelInvariantError(violations)
    return res
