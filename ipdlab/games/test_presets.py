"""Tests for payoff presets and matrix classification."""

import math

import pytest

from ..core.types import DEFAULT_PAYOFF_MATRIX, PayoffMatrix
from . import (
    DEFAULT_PAYOFF_PRESET_ID,
    classify_matrix,
    create_payoff_preset,
    get_payoff_preset,
    list_payoff_presets,
)


class TestRegistry:
    """Tests for preset lookup."""

    def test_default_preset_matches_default_matrix(self):
        preset = get_payoff_preset(DEFAULT_PAYOFF_PRESET_ID)
        assert preset.matrix == DEFAULT_PAYOFF_MATRIX

    def test_lists_all_presets(self):
        ids = [preset.id for preset in list_payoff_presets()]
        assert ids == ["prisoners_dilemma", "stag_hunt", "chicken"]

    def test_unknown_preset_raises(self):
        with pytest.raises(ValueError, match="Unknown payoff preset"):
            get_payoff_preset("matching_pennies")


class TestClassification:
    """Each preset's ordering classifies as the game it is named after."""

    @pytest.mark.parametrize("preset_id", ["prisoners_dilemma", "stag_hunt", "chicken"])
    def test_presets_classify_as_themselves(self, preset_id):
        assert classify_matrix(get_payoff_preset(preset_id).matrix) == preset_id

    def test_degenerate_matrix_is_other(self):
        assert classify_matrix(PayoffMatrix(1, 1, 1, 1)) == "other"


class TestFactory:
    """Tests for create_payoff_preset validation."""

    def test_rejects_non_finite_payoff(self):
        with pytest.raises(ValueError, match="finite"):
            create_payoff_preset("bad", "Bad", "", math.inf, 3, 1, 0)

    def test_rejects_non_numeric_payoff(self):
        with pytest.raises(ValueError, match="number"):
            create_payoff_preset("bad", "Bad", "", "5", 3, 1, 0)

    def test_accepts_arbitrary_numbers(self):
        preset = create_payoff_preset("neg", "Negative", "", -1, -2, -3, -4)
        assert preset.matrix.sucker == -4
