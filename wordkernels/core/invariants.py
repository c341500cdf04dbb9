"""Invariant checkers for the word kernels.

This file mirrors the invariant ids listed in `wordkernels/kernels/exercises/*.yaml`.
Each function takes an observation (the original inputs plus what the kernel
left behind) and returns True when the invariant holds; `check_minmax()` and
`check_rotr3()` return the list of violated invariant IDs (empty = all pass).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class MinMaxObservation:
    """Inputs `(x, y)` and the post-state `(lo, hi)` plus returned `cmp`."""

    x: int
    y: int
    lo: int
    hi: int
    cmp: int


@dataclass(frozen=True)
class Rotr3Observation:
    """Inputs `(x, y, z)` and the post-state `(a, b, c)` of the three slots."""

    x: int
    y: int
    z: int
    a: int
    b: int
    c: int


# ---------------------------------------------------------------------------
# MinMax
# ---------------------------------------------------------------------------

def inv_minmax_ordered(o: MinMaxObservation) -> bool:
    return o.lo <= o.hi


def inv_minmax_lo_is_min(o: MinMaxObservation) -> bool:
    return o.lo == min(o.x, o.y)


def inv_minmax_hi_is_max(o: MinMaxObservation) -> bool:
    return o.hi == max(o.x, o.y)


def inv_minmax_cmp_tristate(o: MinMaxObservation) -> bool:
    """`cmp` is -1/0/+1 for x<y, x==y, x>y on the original values."""
    expected = (o.x > o.y) - (o.x < o.y)
    return o.cmp == expected


def inv_minmax_untouched_when_ordered(o: MinMaxObservation) -> bool:
    if o.x > o.y:
        return True
    return o.lo == o.x and o.hi == o.y


# ---------------------------------------------------------------------------
# Rotate3
# ---------------------------------------------------------------------------

def inv_rotr3_first_from_last(o: Rotr3Observation) -> bool:
    return o.a == o.z


def inv_rotr3_second_from_first(o: Rotr3Observation) -> bool:
    return o.b == o.x


def inv_rotr3_third_from_second(o: Rotr3Observation) -> bool:
    return o.c == o.y


def inv_rotr3_permutation(o: Rotr3Observation) -> bool:
    return sorted((o.a, o.b, o.c)) == sorted((o.x, o.y, o.z))


# ---------------------------------------------------------------------------
# Registries + check functions
# ---------------------------------------------------------------------------

MINMAX_INVARIANTS: dict[str, Callable[[MinMaxObservation], bool]] = {
    "inv_minmax_ordered": inv_minmax_ordered,
    "inv_minmax_lo_is_min": inv_minmax_lo_is_min,
    "inv_minmax_hi_is_max": inv_minmax_hi_is_max,
    "inv_minmax_cmp_tristate": inv_minmax_cmp_tristate,
    "inv_minmax_untouched_when_ordered": inv_minmax_untouched_when_ordered,
}

ROTR3_INVARIANTS: dict[str, Callable[[Rotr3Observation], bool]] = {
    "inv_rotr3_first_from_last": inv_rotr3_first_from_last,
    "inv_rotr3_second_from_first": inv_rotr3_second_from_first,
    "inv_rotr3_third_from_second": inv_rotr3_third_from_second,
    "inv_rotr3_permutation": inv_rotr3_permutation,
}


def check_minmax(obs: MinMaxObservation) -> list[str]:
    """Return list of violated MinMax invariant IDs (empty = all pass)."""
    return [inv_id for inv_id, check_fn in MINMAX_INVARIANTS.items() if not check_fn(obs)]


def check_rotr3(obs: Rotr3Observation) -> list[str]:
    """Return list of violated Rotate3 invariant IDs (empty = all pass)."""
    return [inv_id for inv_id, check_fn in ROTR3_INVARIANTS.items() if not check_fn(obs)]
