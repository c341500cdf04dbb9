"""Tests for wordkernels/core/invariants.py: MinMax and Rotate3 checkers."""

from dataclasses import replace

from wordkernels.core.invariants import (
    MINMAX_INVARIANTS,
    ROTR3_INVARIANTS,
    MinMaxObservation,
    Rotr3Observation,
    check_minmax,
    check_rotr3,
)


def _mm(x, y):
    return MinMaxObservation(x=x, y=y, lo=min(x, y), hi=max(x, y), cmp=(x > y) - (x < y))


def _r3(x, y, z):
    return Rotr3Observation(x=x, y=y, z=z, a=z, b=x, c=y)


class TestRegistries:
    def test_minmax_registry_size(self):
        assert len(MINMAX_INVARIANTS) == 5

    def test_rotr3_registry_size(self):
        assert len(ROTR3_INVARIANTS) == 4


class TestMinMaxChecks:
    def test_correct_observations_pass(self):
        for x, y in [(1, 2), (2, 1), (3, 3), (0, 2**64 - 1)]:
            assert check_minmax(_mm(x, y)) == []

    def test_unordered_output(self):
        obs = replace(_mm(2, 5), lo=5, hi=2)
        violations = check_minmax(obs)
        assert "inv_minmax_ordered" in violations
        assert "inv_minmax_lo_is_min" in violations
        assert "inv_minmax_hi_is_max" in violations

    def test_wrong_sign(self):
        # A code following sign(y - x) is the wrong way round.
        obs = replace(_mm(2, 5), cmp=1)
        assert check_minmax(obs) == ["inv_minmax_cmp_tristate"]

    def test_equal_inputs_need_zero(self):
        obs = replace(_mm(4, 4), cmp=-1)
        assert check_minmax(obs) == ["inv_minmax_cmp_tristate"]

    def test_swap_branch_does_not_require_untouched(self):
        obs = _mm(9, 1)
        assert "inv_minmax_untouched_when_ordered" not in check_minmax(obs)


class TestRotr3Checks:
    def test_correct_rotation_passes(self):
        assert check_rotr3(_r3(1, 2, 3)) == []

    def test_naive_defect_is_flagged(self):
        obs = Rotr3Observation(x=1, y=2, z=3, a=3, b=3, c=1)
        assert check_rotr3(obs) == [
            "inv_rotr3_second_from_first",
            "inv_rotr3_third_from_second",
            "inv_rotr3_permutation",
        ]

    def test_rotate_left_is_not_rotate_right(self):
        obs = Rotr3Observation(x=1, y=2, z=3, a=2, b=3, c=1)
        violations = check_rotr3(obs)
        assert "inv_rotr3_permutation" not in violations
        assert "inv_rotr3_first_from_last" in violations
