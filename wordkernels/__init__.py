"""`wordkernels`: fixed-width MinMax and Rotate3 kernels with cross-validated variants.

Public API:
- `minmax`, `minmax_xor`, `minmax_ternary` over u64 `Word` slots
- `swap`, `rotr3` (naive, defective), `rotr3_fixed`, `rotr3_spec` over u32 slots
- `minmax_values` / `rotr3_values` for plain ints, `*_or_raise` checked forms
"""

from .core.dispatch import (
    MINMAX_VARIANTS,
    ROTR3_VARIANTS,
    MinMaxResult,
    Rotr3Result,
    minmax_or_raise,
    minmax_values,
    rotr3_or_raise,
    rotr3_values,
)
from .core.errors import KernelInvariantError, KernelSpecError, SlotAliasError, WordDomainError
from .core.words import Word, u32, u64
from .kernels.python.minmax_u64 import minmax, minmax_ternary, minmax_xor
from .kernels.python.rotr3_u32 import rotr3, rotr3_fixed, rotr3_spec, swap

__all__ = [
    "MINMAX_VARIANTS",
    "ROTR3_VARIANTS",
    "MinMaxResult",
    "Rotr3Result",
    "minmax_or_raise",
    "minmax_values",
    "rotr3_or_raise",
    "rotr3_values",
    "KernelInvariantError",
    "KernelSpecError",
    "SlotAliasError",
    "WordDomainError",
    "Word",
    "u32",
    "u64",
    "minmax",
    "minmax_ternary",
    "minmax_xor",
    "rotr3",
    "rotr3_fixed",
    "rotr3_spec",
    "swap",
]
