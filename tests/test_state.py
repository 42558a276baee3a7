"""Tests for the breeding history ledger"""
import pytest

from game.offspring import generate_offspring
from game.state import BreedingState, BreedingAttempt, record_attempt
from factories import make_creature, make_recipe


@pytest.fixture
def gen3_result(scripted_rng):
    parent_a = make_creature("a", generation=2)
    parent_b = make_creature("b", generation=1)
    return generate_offspring(parent_a, parent_b, scripted_rng())


def make_attempt(result=None, recipe_id=None, attempt_id="att-1"):
    return BreedingAttempt(
        attempt_id=attempt_id,
        timestamp=1700000000.0,
        parent1_id="a",
        parent2_id="b",
        parent1_species="slime",
        parent2_species="slime",
        gold_cost=1000,
        result=result,
        recipe_id=recipe_id,
    )


class TestRecordAttempt:
    """Tests for record_attempt"""

    def test_successful_attempt(self, gen3_result):
        state = record_attempt(BreedingState(), make_attempt(gen3_result))

        assert state.breeding_attempts == 1
        assert state.total_creatures_bred == 1
        assert state.highest_generation == 3
        assert len(state.history) == 1

    def test_failed_attempt_only_counts_attempt(self):
        state = record_attempt(BreedingState(), make_attempt())

        assert state.breeding_attempts == 1
        assert state.total_creatures_bred == 0
        assert state.highest_generation == 0

    def test_original_state_unchanged(self, gen3_result):
        original = BreedingState()
        record_attempt(original, make_attempt(gen3_result, "slime_fusion"))

        assert original.breeding_attempts == 0
        assert original.history == []
        assert original.discovered_recipes == []

    def test_recipe_discovered_once(self, scripted_rng):
        recipe = make_recipe("slime_fusion")
        result = generate_offspring(make_creature("a"), make_creature("b"), scripted_rng(), recipe)

        state = record_attempt(BreedingState(), make_attempt(result, "slime_fusion", "att-1"))
        state = record_attempt(state, make_attempt(result, "slime_fusion", "att-2"))

        assert state.discovered_recipes == ["slime_fusion"]
        assert state.special_combinations_discovered == 1
        assert state.total_creatures_bred == 2

    def test_highest_generation_never_drops(self, gen3_result, scripted_rng):
        gen1_result = generate_offspring(make_creature("a"), make_creature("b"), scripted_rng())

        state = record_attempt(BreedingState(), make_attempt(gen3_result))
        state = record_attempt(state, make_attempt(gen1_result, attempt_id="att-2"))

        assert state.highest_generation == 3

    def test_to_dict(self, gen3_result):
        state = record_attempt(BreedingState(), make_attempt(gen3_result))

        data = state.to_dict()

        assert data["breeding_attempts"] == 1
        assert data["history"] == ["att-1"]
