from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("z3") is None:  # pragma: no cover
    pytest.skip("z3-solver not installed", allow_module_level=True)

import z3

from tools.exercise_harness import (
    Z3_MINMAX_MODELS,
    _prove,
    bv64,
    run_z3_checks,
    z3_minmax_spec,
)


def test_z3_checks_pass() -> None:
    assert run_z3_checks() == []


def test_z3_variants_are_pairwise_equivalent() -> None:
    x, y = bv64("x"), bv64("y")
    encoded = {name: model(x, y) for name, model in Z3_MINMAX_MODELS.items()}
    ref = encoded["branch"]
    for name, outs in encoded.items():
        claim = z3.And(*(a == b for a, b in zip(outs, ref)))
        assert _prove(claim, 10_000) is None, name


def test_z3_detects_a_broken_encoding() -> None:
    x, y = bv64("x"), bv64("y")
    spec_lo, spec_hi, _ = z3_minmax_spec(x, y)
    # Signed comparison orders 2**63 below 0, which the unsigned contract forbids.
    broken_lo = z3.If(x <= y, x, y)
    cex = _prove(broken_lo == spec_lo, 10_000)
    assert cex is not None
