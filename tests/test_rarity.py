"""Tests for rarity upgrade rolls"""
import random

import pytest

from core.models import Rarity
from game.rarity import roll_rarity_upgrade
from factories import make_recipe


class TestRollRarityUpgrade:
    """Tests for roll_rarity_upgrade"""

    def test_successful_roll_promotes_one_tier(self, scripted_rng):
        assert roll_rarity_upgrade(Rarity.COMMON, scripted_rng(0.05)) == (True, Rarity.UNCOMMON)

    def test_failed_roll_keeps_rarity(self, scripted_rng):
        assert roll_rarity_upgrade(Rarity.EPIC, scripted_rng(0.10)) == (False, Rarity.EPIC)

    def test_mythical_never_upgrades(self, scripted_rng):
        rng = scripted_rng(0.0)
        assert roll_rarity_upgrade(Rarity.MYTHICAL, rng) == (False, Rarity.MYTHICAL)
        assert rng.calls == 1

    def test_recipe_minimum_is_not_an_upgrade(self, scripted_rng):
        recipe = make_recipe(min_rarity=Rarity.RARE)

        upgraded, rarity = roll_rarity_upgrade(Rarity.COMMON, scripted_rng(0.5), recipe)

        assert rarity == Rarity.RARE
        assert upgraded is False

    def test_recipe_minimum_below_roll_is_ignored(self, scripted_rng):
        recipe = make_recipe(min_rarity=Rarity.UNCOMMON)

        assert roll_rarity_upgrade(Rarity.RARE, scripted_rng(0.05), recipe) == (True, Rarity.EPIC)

    def test_roll_and_minimum_combined(self, scripted_rng):
        # Rolled to uncommon, lifted to legendary: still counts as upgraded
        recipe = make_recipe(min_rarity=Rarity.LEGENDARY)

        assert roll_rarity_upgrade(Rarity.COMMON, scripted_rng(0.05), recipe) == (True, Rarity.LEGENDARY)

    def test_accepts_rarity_string(self, scripted_rng):
        assert roll_rarity_upgrade("rare", scripted_rng(0.99)) == (False, Rarity.RARE)

    def test_upgrade_rate_near_ten_percent(self):
        rng = random.Random(2024)
        upgrades = sum(roll_rarity_upgrade(Rarity.COMMON, rng)[0] for _ in range(1000))

        assert 50 <= upgrades <= 150

    def test_mythical_never_upgrades_over_many_trials(self):
        rng = random.Random(7)
        assert not any(roll_rarity_upgrade(Rarity.MYTHICAL, rng)[0] for _ in range(1000))

    def test_unknown_rarity_raises(self, scripted_rng):
        with pytest.raises(ValueError):
            roll_rarity_upgrade("shiny", scripted_rng())
