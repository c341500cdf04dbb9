#!/usr/bin/env python3
"""Sweep a small signed range through a MinMax variant and print the table.

Each value of `[lo, hi)` is coerced to an unsigned 64-bit word (so negative
values land near 2**64), every ordered pair is run through the kernel, and each
line shows the original pair, the resulting pair and the returned comparison
code. Words are printed as signed 64-bit values.

With `--rotr3` the naive and fixed Rotate3 variants are shown side by side for
a few triples as well.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordkernels.core.config import DEMO_SWEEP_BOUND, demo_config_from_env
from wordkernels.core.dispatch import MINMAX_VARIANTS, rotr3_values
from wordkernels.core.words import U64_BITS, to_signed, u64, wrap_unsigned


ROTR3_SAMPLES = ((1, 2, 3), (7, 7, 7), (0, 1, 0), (0xFFFFFFFF, 0, 1))


def sweep_lines(lo: int, hi: int, variant: str) -> Iterator[str]:
    kernel = MINMAX_VARIANTS[variant]
    for i in range(lo, hi):
        for j in range(lo, hi):
            iv = wrap_unsigned(i, U64_BITS)
            jv = wrap_unsigned(j, U64_BITS)
            x, y = u64(iv), u64(jv)
            out = kernel(x, y)
            yield (
                f"{to_signed(iv, U64_BITS)} {to_signed(jv, U64_BITS)} --> "
                f"{to_signed(x.value, U64_BITS)} {to_signed(y.value, U64_BITS)} ({out})"
            )


def rotr3_lines() -> Iterator[str]:
    for triple in ROTR3_SAMPLES:
        naive = rotr3_values(*triple, variant="naive").as_tuple()
        fixed = rotr3_values(*triple, variant="fixed").as_tuple()
        yield f"{triple} --> naive={naive} fixed={fixed}"


def main(argv: Sequence[str] | None = None) -> int:
    cfg = demo_config_from_env()
    parser = argparse.ArgumentParser(description="MinMax sweep demonstration")
    parser.add_argument("--lo", type=int, default=cfg.lo, help="First signed sweep value (inclusive)")
    parser.add_argument("--hi", type=int, default=cfg.hi, help="Last signed sweep value (exclusive)")
    parser.add_argument("--variant", default=cfg.variant, help=f"One of: {', '.join(MINMAX_VARIANTS)}")
    parser.add_argument("--rotr3", action="store_true", help="Also show naive vs fixed Rotate3")
    args = parser.parse_args(argv)

    if args.variant not in MINMAX_VARIANTS:
        print(f"[minmax-demo] FAIL: unsupported variant {args.variant!r}")
        return 2
    if not (-DEMO_SWEEP_BOUND <= args.lo <= args.hi <= DEMO_SWEEP_BOUND):
        print(f"[minmax-demo] FAIL: need -{DEMO_SWEEP_BOUND} <= lo <= hi <= {DEMO_SWEEP_BOUND}")
        return 2

    for line in sweep_lines(args.lo, args.hi, args.variant):
        print(line)
    if args.rotr3:
        print("[minmax-demo] rotr3 (x, y, z):")
        for line in rotr3_lines():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
