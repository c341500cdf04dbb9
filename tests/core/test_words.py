"""Tests for wordkernels/core/words.py: the fixed-width word model."""

from __future__ import annotations

import pytest

from wordkernels.core.errors import SlotAliasError, WordDomainError
from wordkernels.core.words import (
    U32_MAX,
    U64_MAX,
    Word,
    require_distinct,
    require_uint,
    to_signed,
    u32,
    u64,
    wrap_unsigned,
)


class TestRequireUint:
    def test_accepts_bounds(self):
        assert require_uint("v", 0, 64) == 0
        assert require_uint("v", U64_MAX, 64) == U64_MAX

    def test_rejects_out_of_range(self):
        with pytest.raises(WordDomainError, match=r"v must be in \[0, 4294967295\]"):
            require_uint("v", U32_MAX + 1, 32)
        with pytest.raises(WordDomainError):
            require_uint("v", -1, 64)

    def test_rejects_bool_and_str(self):
        with pytest.raises(TypeError):
            require_uint("v", True, 64)
        with pytest.raises(TypeError):
            require_uint("v", "1", 64)  # type: ignore[arg-type]


class TestWrapAndSigned:
    def test_negative_wraps_to_top(self):
        assert wrap_unsigned(-5, 64) == U64_MAX - 4
        assert wrap_unsigned(-1, 32) == U32_MAX

    def test_positive_unchanged(self):
        assert wrap_unsigned(4, 64) == 4

    def test_to_signed_inverts_wrap(self):
        for v in range(-5, 5):
            assert to_signed(wrap_unsigned(v, 64), 64) == v

    def test_to_signed_extremes(self):
        assert to_signed(2**63, 64) == -(2**63)
        assert to_signed(2**63 - 1, 64) == 2**63 - 1


class TestWord:
    def test_defaults_to_u64_zero(self):
        w = Word()
        assert (w.value, w.bits, w.max) == (0, 64, U64_MAX)

    def test_constructors(self):
        assert u32(7).bits == 32
        assert u64(7).bits == 64

    def test_rejects_out_of_range_on_construction(self):
        with pytest.raises(WordDomainError):
            u32(U32_MAX + 1)

    def test_rejects_out_of_range_on_store(self):
        w = u32(1)
        with pytest.raises(WordDomainError):
            w.value = -1
        assert w.value == 1

    def test_width_is_fixed(self):
        w = u32(1)
        with pytest.raises(AttributeError):
            w.bits = 64

    def test_equality_is_identity(self):
        assert u64(3) != u64(3)
        w = u64(3)
        assert w == w

    def test_int_conversion(self):
        assert int(u64(9)) == 9
        assert [10, 20, 30][u32(1)] == 20


def test_require_distinct() -> None:
    a, b = u32(1), u32(1)
    require_distinct(x=a, y=b)
    with pytest.raises(SlotAliasError, match="x and y"):
        require_distinct(x=a, y=a)
