"""
Rotate-right-by-one kernel over three unsigned 32-bit words.

Semantics (see `wordkernels/kernels/exercises/rotr3_u32.yaml`):
    (x, y, z) -> (z, x, y)

`rotr3` is the naive version and is kept *as written*: it reads `y`'s new value
from the already-overwritten `x`, so its net effect is (x, y, z) -> (z, z, x).
It exists so the defect stays pinned by tests; use `rotr3_fixed`.
"""

from __future__ import annotations

from ...core.words import U32_BITS, Word, require_distinct, require_uint, require_word, u32


def swap(x: Word, y: Word) -> None:
    require_word("x", x, U32_BITS)
    require_word("y", y, U32_BITS)
    require_distinct(x=x, y=y)
    tmp = x.value
    x.value = y.value
    y.value = tmp


def _require_triple(x: Word, y: Word, z: Word) -> None:
    require_word("x", x, U32_BITS)
    require_word("y", y, U32_BITS)
    require_word("z", z, U32_BITS)
    require_distinct(x=x, y=y, z=z)


def rotr3(x: Word, y: Word, z: Word) -> None:
    """Naive rotate-right. Defective: yields (z, z, x)."""
    _require_triple(x, y, z)
    tmp = x.value
    x.value = z.value
    y.value = x.value
    z.value = tmp


def rotr3_fixed(x: Word, y: Word, z: Word) -> None:
    """Rotate right by one: (x, y, z) -> (z, x, y)."""
    _require_triple(x, y, z)
    tmp_x = x.value
    tmp_y = y.value
    x.value = z.value
    y.value = tmp_x
    z.value = tmp_y


def rotr3_spec(x: int, y: int, z: int) -> bool:
    """
    Executable statement of the rotate-right contract.

    Takes plain values (the caller's state is never touched), rotates copies with
    `rotr3_fixed` and checks the result is `(z, x, y)`.
    """
    require_uint("x", x, U32_BITS)
    require_uint("y", y, U32_BITS)
    require_uint("z", z, U32_BITS)
    a, b, c = u32(x), u32(y), u32(z)
    rotr3_fixed(a, b, c)
    return a.value == z and b.value == x and c.value == y
