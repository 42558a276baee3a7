"""Tests for generation stat caps"""
import pytest

from core.models import STAT_KEYS
from game.stat_caps import calculate_stat_caps


class TestCalculateStatCaps:

    @pytest.mark.parametrize("generation,expected", [(0, 100), (1, 110), (2, 120), (3, 130), (4, 140), (5, 150)])
    def test_cap_per_generation(self, generation, expected):
        caps = calculate_stat_caps(generation)
        assert caps.attack == expected

    def test_same_cap_for_every_stat(self):
        caps = calculate_stat_caps(3)
        assert {caps.get(stat) for stat in STAT_KEYS} == {130}

    @pytest.mark.parametrize("generation", [-1, 6])
    def test_out_of_range_generation_raises(self, generation):
        with pytest.raises(ValueError, match="generation"):
            calculate_stat_caps(generation)
