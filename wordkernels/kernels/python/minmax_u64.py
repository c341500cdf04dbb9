"""
MinMax kernel over unsigned 64-bit words.

This implements the semantics described in `wordkernels/kernels/exercises/minmax_u64.yaml`:
- after the call, slot `x` holds min(x, y) and slot `y` holds max(x, y),
- the return value is the tri-state comparison of the *original* values:
  -1 if x < y, 0 if x == y, +1 if x > y.

Three interchangeable variants are provided and are cross-validated by the test
suite and `tools/exercise_harness.py`:
- `minmax`: branch on the comparison, swap through a temporary,
- `minmax_xor`: branch on the comparison, swap with three XOR assignments,
- `minmax_ternary`: conditional selection from locals read up front.
"""

from __future__ import annotations

from ...core.words import U64_BITS, Word, require_distinct, require_word


def _require_pair(x: Word, y: Word) -> None:
    require_word("x", x, U64_BITS)
    require_word("y", y, U64_BITS)
    require_distinct(x=x, y=y)


def minmax(x: Word, y: Word) -> int:
    """Order `(x, y)` in place using a temporary; return the comparison code."""
    _require_pair(x, y)
    if x.value > y.value:
        tmp = x.value
        x.value = y.value
        y.value = tmp
        return 1
    return -int(x.value != y.value)


def minmax_xor(x: Word, y: Word) -> int:
    """Same contract as `minmax`, swapping with the XOR idiom.

    The comparison branch stays: XOR-swapping equal values is a no-op, so the
    only case needing a swap is `x > y`.
    """
    _require_pair(x, y)
    if x.value > y.value:
        x.value = x.value ^ y.value
        y.value = y.value ^ x.value
        x.value = x.value ^ y.value
        return 1
    return -int(x.value != y.value)


def minmax_ternary(x: Word, y: Word) -> int:
    """Same contract as `minmax`, by conditional selection."""
    _require_pair(x, y)
    # Both originals are read before either slot is written.
    xv, yv = x.value, y.value
    x.value = xv if xv < yv else yv
    y.value = yv if xv < yv else xv
    return -1 if xv < yv else 0 if xv == yv else 1
