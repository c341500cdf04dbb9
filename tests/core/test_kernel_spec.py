from __future__ import annotations

from pathlib import Path

import pytest

from wordkernels.core.dispatch import MINMAX_VARIANTS, ROTR3_VARIANTS
from wordkernels.core.errors import KernelSpecError
from wordkernels.core.invariants import MINMAX_INVARIANTS, ROTR3_INVARIANTS
from wordkernels.core.kernel_spec import (
    KERNEL_NAMES,
    load_kernel_spec,
    load_kernel_spec_file,
    parse_kernel_spec,
)
from wordkernels.core.words import U32_BITS, U64_BITS


def _descriptor(**overrides):
    obj = {
        "name": "k",
        "version": "1",
        "word": {"bits": 8, "arity": 2},
        "variants": ["a", "b"],
        "reference_variant": "a",
        "invariants": ["inv_x"],
    }
    obj.update(overrides)
    return obj


def test_minmax_descriptor_matches_registries() -> None:
    spec = load_kernel_spec("minmax_u64")
    assert spec.word_bits == U64_BITS
    assert spec.arity == 2
    assert set(spec.variants) == set(MINMAX_VARIANTS)
    assert set(spec.invariants) == set(MINMAX_INVARIANTS)
    assert spec.reference_variant in MINMAX_VARIANTS
    assert spec.defective_variants == ()


def test_rotr3_descriptor_matches_registries() -> None:
    spec = load_kernel_spec("rotr3_u32")
    assert spec.word_bits == U32_BITS
    assert spec.arity == 3
    assert set(spec.variants) == set(ROTR3_VARIANTS)
    assert set(spec.invariants) == set(ROTR3_INVARIANTS)
    assert spec.reference_variant == "fixed"
    assert spec.defective_variants == ("naive",)


def test_all_kernel_names_load() -> None:
    assert {load_kernel_spec(n).name for n in KERNEL_NAMES} == set(KERNEL_NAMES)


def test_unknown_kernel() -> None:
    with pytest.raises(ValueError, match="unknown kernel"):
        load_kernel_spec("sort4")


def test_parse_minimal_descriptor() -> None:
    spec = parse_kernel_spec(_descriptor())
    assert spec.variants == ("a", "b")
    assert spec.word_bits == 8


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"word": {"bits": 0, "arity": 2}}, "word.bits"),
        ({"word": {"bits": True, "arity": 2}}, "word.bits"),
        ({"word": []}, "word must be a mapping"),
        ({"variants": []}, "variants"),
        ({"variants": ["a", "a"]}, "duplicates"),
        ({"reference_variant": "c"}, "not a listed variant"),
        ({"defective_variants": ["a"]}, "cannot be defective"),
        ({"defective_variants": ["z"]}, "not a listed variant"),
        ({"invariants": [""]}, r"invariants\[0\]"),
    ],
)
def test_parse_rejects_malformed(overrides, message) -> None:
    with pytest.raises(KernelSpecError, match=message):
        parse_kernel_spec(_descriptor(**overrides))


def test_parse_rejects_non_mapping() -> None:
    with pytest.raises(KernelSpecError):
        parse_kernel_spec(["name", "k"])


def test_file_name_must_match(tmp_path: Path) -> None:
    path = tmp_path / "other.yaml"
    path.write_text(
        "name: k\nversion: 1\nword: {bits: 8, arity: 2}\nvariants: [a]\n"
        "reference_variant: a\ninvariants: [inv_x]\n",
        encoding="utf-8",
    )
    with pytest.raises(KernelSpecError, match="does not match"):
        load_kernel_spec_file(path)
