#!/usr/bin/env python3
"""Cross-validation + equivalence harness for the word kernels.

Runs three kinds of assurance checks:
1) Descriptor check: the YAML kernel descriptors agree with the Python variant
   and invariant registries.
2) Trace comparison: every variant vs the reference variant on boundary and
   random inputs, plus the registered invariants.
3) Z3 equivalence: bit-vector encodings of each variant are proven to satisfy
   the contract for *all* inputs; the naive Rotate3 variant must yield a
   counterexample, which is replayed against the Python kernel.

If z3-solver is not installed, Z3 checks are skipped.
"""
from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordkernels.core.config import harness_config_from_env
from wordkernels.core.dispatch import MINMAX_VARIANTS, ROTR3_VARIANTS, minmax_values, rotr3_values
from wordkernels.core.invariants import (
    MINMAX_INVARIANTS,
    ROTR3_INVARIANTS,
    MinMaxObservation,
    Rotr3Observation,
    check_minmax,
    check_rotr3,
)
from wordkernels.core.kernel_spec import load_kernel_spec
from wordkernels.core.words import U32_BITS, U32_MAX, U64_BITS, U64_MAX
from wordkernels.kernels.python.rotr3_u32 import rotr3_spec

try:
    import z3  # type: ignore
    HAS_Z3 = True
except ImportError:
    HAS_Z3 = False


# ---------- Input generation ----------


def boundary_values(word_max: int) -> List[int]:
    """Values near 0, near the top of the word, and a few in between."""
    half = (word_max + 1) // 2
    vals = {0, 1, 2, 5, half - 1, half, half + 1, word_max - 5, word_max - 1, word_max}
    return sorted(v for v in vals if 0 <= v <= word_max)


def boundary_pairs() -> List[Tuple[int, int]]:
    vals = boundary_values(U64_MAX)
    return [(x, y) for x in vals for y in vals]


def random_pairs(rng: random.Random, n: int) -> Iterable[Tuple[int, int]]:
    for _ in range(n):
        x = rng.getrandbits(U64_BITS)
        # Bias towards equal and adjacent values, which are the interesting edges.
        pick = rng.randrange(4)
        if pick == 0:
            y = x
        elif pick == 1:
            y = (x + 1) & U64_MAX
        else:
            y = rng.getrandbits(U64_BITS)
        yield x, y


def random_triples(rng: random.Random, n: int) -> Iterable[Tuple[int, int, int]]:
    for _ in range(n):
        yield rng.getrandbits(U32_BITS), rng.getrandbits(U32_BITS), rng.getrandbits(U32_BITS)


# ---------- Descriptor check ----------


def check_descriptors() -> List[str]:
    errors: List[str] = []
    mm = load_kernel_spec("minmax_u64")
    r3 = load_kernel_spec("rotr3_u32")
    if mm.word_bits != U64_BITS or mm.arity != 2:
        errors.append(f"minmax_u64: descriptor word is {mm.word_bits}-bit x{mm.arity}")
    if r3.word_bits != U32_BITS or r3.arity != 3:
        errors.append(f"rotr3_u32: descriptor word is {r3.word_bits}-bit x{r3.arity}")
    if set(mm.variants) != set(MINMAX_VARIANTS):
        errors.append(f"minmax_u64: variants {sorted(mm.variants)} != {sorted(MINMAX_VARIANTS)}")
    if set(r3.variants) != set(ROTR3_VARIANTS):
        errors.append(f"rotr3_u32: variants {sorted(r3.variants)} != {sorted(ROTR3_VARIANTS)}")
    if set(mm.invariants) != set(MINMAX_INVARIANTS):
        errors.append(f"minmax_u64: invariants {sorted(mm.invariants)} != {sorted(MINMAX_INVARIANTS)}")
    if set(r3.invariants) != set(ROTR3_INVARIANTS):
        errors.append(f"rotr3_u32: invariants {sorted(r3.invariants)} != {sorted(ROTR3_INVARIANTS)}")
    return errors


# ---------- Trace comparison ----------


def compare_minmax(pairs: Iterable[Tuple[int, int]], *, reference: str = "branch") -> List[str]:
    errors: List[str] = []
    for x, y in pairs:
        ref = minmax_values(x, y, variant=reference)
        violations = check_minmax(MinMaxObservation(x=x, y=y, lo=ref.lo, hi=ref.hi, cmp=ref.cmp))
        if violations:
            errors.append(f"minmax[{reference}]({x}, {y}) violates {violations}")
        for name in MINMAX_VARIANTS:
            if name == reference:
                continue
            got = minmax_values(x, y, variant=name)
            if got != ref:
                errors.append(f"minmax[{name}]({x}, {y}) = {got} != {reference} {ref}")
    return errors


def compare_rotr3(triples: Iterable[Tuple[int, int, int]]) -> List[str]:
    errors: List[str] = []
    for x, y, z in triples:
        res = rotr3_values(x, y, z, variant="fixed")
        violations = check_rotr3(Rotr3Observation(x=x, y=y, z=z, a=res.x, b=res.y, c=res.z))
        if violations:
            errors.append(f"rotr3_fixed({x}, {y}, {z}) violates {violations}")
        cycled = (x, y, z)
        for _ in range(3):
            cycled = rotr3_values(*cycled, variant="fixed").as_tuple()
        if cycled != (x, y, z):
            errors.append(f"rotr3_fixed^3({x}, {y}, {z}) = {cycled}")
        if not rotr3_spec(x, y, z):
            errors.append(f"rotr3_spec({x}, {y}, {z}) is False")
    return errors


def naive_defect_present() -> bool:
    """The naive Rotate3 keeps its documented defect on (1, 2, 3)."""
    return rotr3_values(1, 2, 3, variant="naive").as_tuple() == (3, 3, 1)


def run_trace_checks(traces: int, seed: int) -> Tuple[int, List[str]]:
    rng = random.Random(seed)
    pairs = boundary_pairs() + list(random_pairs(rng, traces))
    u32_vals = boundary_values(U32_MAX)
    triples = [(a, b, c) for a in u32_vals[:4] for b in u32_vals[-4:] for c in u32_vals[3:7]]
    triples += list(random_triples(rng, traces))

    errors = compare_minmax(pairs, reference=load_kernel_spec("minmax_u64").reference_variant)
    errors += compare_rotr3(triples)
    if not naive_defect_present():
        errors.append("rotr3 (naive) no longer shows its documented defect on (1, 2, 3)")
    return len(pairs) + len(triples), errors


# ---------- Z3 encoding ----------


def bv32(name: str):
    return z3.BitVec(name, 32)


def bv64(name: str):
    return z3.BitVec(name, 64)


def z3_cmp(x, y):
    return z3.If(z3.ULT(x, y), z3.IntVal(-1), z3.If(x == y, z3.IntVal(0), z3.IntVal(1)))


def z3_minmax_spec(x, y):
    return z3.If(z3.ULE(x, y), x, y), z3.If(z3.ULE(x, y), y, x), z3_cmp(x, y)


def z3_minmax_branch(x, y):
    swap = z3.UGT(x, y)
    lo = z3.If(swap, y, x)
    hi = z3.If(swap, x, y)
    rc = z3.If(swap, z3.IntVal(1), z3.If(x != y, z3.IntVal(-1), z3.IntVal(0)))
    return lo, hi, rc


def z3_minmax_xor(x, y):
    swap = z3.UGT(x, y)
    x1 = x ^ y
    y1 = y ^ x1
    x2 = x1 ^ y1
    rc = z3.If(swap, z3.IntVal(1), z3.If(x != y, z3.IntVal(-1), z3.IntVal(0)))
    return z3.If(swap, x2, x), z3.If(swap, y1, y), rc


def z3_minmax_ternary(x, y):
    lt = z3.ULT(x, y)
    return z3.If(lt, x, y), z3.If(lt, y, x), z3_cmp(x, y)


Z3_MINMAX_MODELS = {
    "branch": z3_minmax_branch,
    "xor": z3_minmax_xor,
    "ternary": z3_minmax_ternary,
}


def z3_rotr3_naive(x, y, z):
    tmp = x
    a = z
    b = a
    c = tmp
    return a, b, c


def z3_rotr3_fixed(x, y, z):
    tmp_x, tmp_y = x, y
    return z, tmp_x, tmp_y


def _prove(claim, timeout_ms: int) -> Optional[object]:
    """Return None if *claim* holds for all inputs, else a counterexample model."""
    s = z3.Solver()
    s.set("timeout", timeout_ms)
    s.add(z3.Not(claim))
    res = s.check()
    if res == z3.unsat:
        return None
    if res == z3.sat:
        return s.model()
    return "unknown"


def run_z3_checks(timeout_ms: int = 10_000) -> List[str]:
    errors: List[str] = []
    x, y = bv64("x"), bv64("y")
    spec_lo, spec_hi, spec_cmp = z3_minmax_spec(x, y)
    for name, model in Z3_MINMAX_MODELS.items():
        lo, hi, rc = model(x, y)
        claim = z3.And(lo == spec_lo, hi == spec_hi, rc == spec_cmp, z3.ULE(lo, hi))
        cex = _prove(claim, timeout_ms)
        if cex is not None:
            errors.append(f"minmax[{name}]: contract not proven ({cex})")

    a, b, c = bv32("a"), bv32("b"), bv32("c")
    ra, rb, rc3 = z3_rotr3_fixed(a, b, c)
    cex = _prove(z3.And(ra == c, rb == a, rc3 == b), timeout_ms)
    if cex is not None:
        errors.append(f"rotr3_fixed: contract not proven ({cex})")

    na, nb, nc = z3_rotr3_naive(a, b, c)
    cex = _prove(z3.And(na == c, nb == a, nc == b), timeout_ms)
    if cex is None or isinstance(cex, str):
        errors.append("rotr3 (naive): expected a counterexample, none found")
    else:
        xv, yv, zv = (cex.eval(v, model_completion=True).as_long() for v in (a, b, c))
        got = rotr3_values(xv, yv, zv, variant="naive").as_tuple()
        if got == (zv, xv, yv):
            errors.append(f"rotr3 (naive): counterexample ({xv}, {yv}, {zv}) does not reproduce")
    return errors


# ---------- CLI ----------


def main(argv: Sequence[str] | None = None) -> int:
    cfg = harness_config_from_env()
    parser = argparse.ArgumentParser(description="Word kernel cross-validation + equivalence harness")
    parser.add_argument("--mode", choices=["trace", "z3", "both"], default="both")
    parser.add_argument("--traces", type=int, default=cfg.traces, help="Random input count per kernel")
    parser.add_argument("--seed", type=int, default=cfg.seed, help="Random seed")
    parser.add_argument("--timeout", type=int, default=10, help="Z3 timeout per check (seconds)")
    args = parser.parse_args(argv)

    failed = False

    errors = check_descriptors()
    if errors:
        failed = True
        print("[harness] descriptor mismatches:")
        for e in errors:
            print("  -", e)
    else:
        print("[harness] descriptors: ok")

    if args.mode in {"trace", "both"}:
        total, errors = run_trace_checks(max(0, args.traces), args.seed)
        print(f"[harness] trace compare: {total} inputs, mismatches={len(errors)}")
        if errors:
            failed = True
            for e in errors:
                print("  -", e)

    if args.mode in {"z3", "both"}:
        if not HAS_Z3:
            print("[harness] z3 checks: skipped (z3-solver not installed)")
        else:
            errors = run_z3_checks(timeout_ms=max(1, args.timeout) * 1000)
            if errors:
                failed = True
                print("[harness] z3 checks:")
                for e in errors:
                    print("  -", e)
            else:
                print("[harness] z3 equivalence: ok")

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
