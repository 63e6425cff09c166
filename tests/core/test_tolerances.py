"""
Tests for tolerance tier selection.
"""

import dataclasses

import pytest

from pymatrix.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    EXACT,
    select_tolerance,
)


class TestSelectTolerance:

    def test_default_is_fp64(self):
        assert select_tolerance() is CPU_FP64

    def test_exact(self):
        tier = select_tolerance(exact=True)
        assert tier is EXACT
        assert tier.rtol == 0.0
        assert tier.atol == 0.0

    def test_exact_wins_over_ill_conditioned(self):
        assert select_tolerance(exact=True, is_ill_conditioned=True) is EXACT

    def test_ill_conditioned(self):
        assert select_tolerance(is_ill_conditioned=True) is CPU_FP64_ILL_CONDITIONED

    def test_tiers_ordered(self):
        assert EXACT.rtol < CPU_FP64.rtol < CPU_FP64_ILL_CONDITIONED.rtol
        assert EXACT.atol < CPU_FP64.atol < CPU_FP64_ILL_CONDITIONED.atol

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CPU_FP64.rtol = 1.0
