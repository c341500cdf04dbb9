"""
Core word model, invariants and dispatch
"""

from .errors import KernelInvariantError, KernelSpecError, SlotAliasError, WordDomainError
from .invariants import (
    MINMAX_INVARIANTS,
    ROTR3_INVARIANTS,
    MinMaxObservation,
    Rotr3Observation,
    check_minmax,
    check_rotr3,
)
from .words import (
    U32_BITS,
    U32_MAX,
    U64_BITS,
    U64_MAX,
    Word,
    require_uint,
    to_signed,
    u32,
    u64,
    wrap_unsigned,
)

__all__ = [
    "KernelInvariantError",
    "KernelSpecError",
    "SlotAliasError",
    "WordDomainError",
    "MINMAX_INVARIANTS",
    "ROTR3_INVARIANTS",
    "MinMaxObservation",
    "Rotr3Observation",
    "check_minmax",
    "check_rotr3",
    "U32_BITS",
    "U32_MAX",
    "U64_BITS",
    "U64_MAX",
    "Word",
    "require_uint",
    "to_signed",
    "u32",
    "u64",
    "wrap_unsigned",
]
