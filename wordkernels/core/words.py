"""Fixed-width unsigned words.

Kernels in this package operate on *slots*: mutable `Word` cells that a kernel
may rewrite in place. This is how the pointer-parameter contract of the kernels
is expressed in Python.

Conventions:
- a word has a fixed width (`U32_BITS` or `U64_BITS`),
- every stored value is in `[0, 2**bits - 1]`,
- `bool` is rejected even though it is an `int` subclass.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import SlotAliasError, WordDomainError


U32_BITS = 32
U64_BITS = 64

U32_MAX = (1 << U32_BITS) - 1
U64_MAX = (1 << U64_BITS) - 1


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def word_max(bits: int) -> int:
    _require_int("bits", bits)
    if bits <= 0:
        raise ValueError("bits must be positive")
    return (1 << bits) - 1


def require_uint(name: str, value: int, bits: int) -> int:
    """Return *value* unchanged if it fits in an unsigned *bits*-wide word."""
    _require_int(name, value)
    hi = word_max(bits)
    if not (0 <= value <= hi):
        raise WordDomainError(f"{name} must be in [0, {hi}]")
    return value


def wrap_unsigned(value: int, bits: int) -> int:
    """Two's-complement coercion of a Python int into a *bits*-wide word.

    ``wrap_unsigned(-5, 64) == 2**64 - 5``, matching an assignment of a
    negative literal to an unsigned C variable.
    """
    _require_int("value", value)
    return value & word_max(bits)


def to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned *bits*-wide word as two's-complement signed."""
    require_uint("value", value, bits)
    if value >> (bits - 1):
        return value - (1 << bits)
    return value


@dataclass(eq=False)
class Word:
    """A mutable unsigned slot of a fixed bit width.

    Identity matters: two distinct `Word` objects are two distinct storage
    locations even when they hold the same value, so equality is identity.
    """

    value: int = 0
    bits: int = U64_BITS

    def __post_init__(self) -> None:
        word_max(self.bits)
        require_uint("value", self.value, self.bits)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "value" and "bits" in self.__dict__:
            require_uint("value", value, self.bits)  # type: ignore[arg-type]
        elif name == "bits" and "bits" in self.__dict__:
            raise AttributeError("word width is fixed")
        object.__setattr__(self, name, value)

    @property
    def max(self) -> int:
        return word_max(self.bits)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


def u32(value: int = 0) -> Word:
    return Word(value, U32_BITS)


def u64(value: int = 0) -> Word:
    return Word(value, U64_BITS)


def require_word(name: str, slot: Word, bits: int) -> Word:
    if not isinstance(slot, Word):
        raise TypeError(f"{name} must be a Word")
    if slot.bits != bits:
        raise WordDomainError(f"{name} must be a {bits}-bit word (got {slot.bits}-bit)")
    return slot


def require_distinct(**slots: Word) -> None:
    """Kernels write through every slot; the same storage may not appear twice."""
    seen: dict[int, str] = {}
    for name, slot in slots.items():
        other = seen.get(id(slot))
        if other is not None:
            raise SlotAliasError(f"{other} and {name} must be distinct slots")
        seen[id(slot)] = name
