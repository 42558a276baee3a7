"""Tests for breeding validation"""
from hypothesis import given, strategies as st, settings

from game.cost import calculate_breeding_cost
from game.validation import validate_breeding, validate_breeding_cost
from factories import make_creature, make_recipe


class TestValidateBreeding:
    """Tests for validate_breeding"""

    def test_valid_pair(self, parent1, parent2):
        result = validate_breeding(parent1, parent2)

        assert result.valid is True
        assert result.errors == ()
        assert result.warnings == ()

    def test_missing_parent(self, parent1):
        result = validate_breeding(parent1, None)

        assert result.valid is False
        assert result.errors == ("Two parent creatures are required",)

    def test_self_breeding_rejected(self, parent1):
        result = validate_breeding(parent1, parent1)

        assert result.valid is False
        assert any("itself" in error for error in result.errors)

    def test_generation_5_parent_rejected(self, parent1):
        elder = make_creature("elder", "dragon", name="Old Smok", generation=5)

        result = validate_breeding(parent1, elder)

        assert result.valid is False
        assert result.errors == ("Old Smok cannot breed (generation or exhaustion limit)",)

    def test_exhausted_parent_rejected(self, parent1):
        tired = make_creature("tired", "wolf", exhaustion_level=5)

        result = validate_breeding(tired, parent1)

        assert result.valid is False
        assert result.errors == ("wolf cannot breed (generation or exhaustion limit)",)

    def test_insufficient_gold(self, parent1, parent2):
        cost = calculate_breeding_cost(parent1, parent2)

        result = validate_breeding(parent1, parent2, player_gold=400, cost=cost)

        assert result.valid is False
        assert result.errors == ("Insufficient gold (need 600 more)",)

    def test_large_shortfall_formatted(self):
        parent_a = make_creature("a", level=50, rarity="legendary")
        parent_b = make_creature("b", level=50)
        cost = calculate_breeding_cost(parent_a, parent_b)

        result = validate_breeding(parent_a, parent_b, player_gold=0, cost=cost)

        assert result.errors == ("Insufficient gold (need 160,000 more)",)

    def test_missing_materials(self):
        parent_a = make_creature("a")
        parent_b = make_creature("b")
        cost = calculate_breeding_cost(parent_a, parent_b, make_recipe())

        result = validate_breeding(parent_a, parent_b, 5000, {"slime_gel": 2}, cost)

        assert result.valid is False
        assert result.errors == ("Need 3 more Slime Gel",)

    def test_enough_materials(self):
        parent_a = make_creature("a")
        parent_b = make_creature("b")
        cost = calculate_breeding_cost(parent_a, parent_b, make_recipe())

        result = validate_breeding(parent_a, parent_b, 1000, {"slime_gel": 5}, cost)

        assert result.valid is True

    def test_errors_accumulate(self):
        parent = make_creature("same", generation=5, exhaustion_level=1)
        cost = calculate_breeding_cost(parent, parent, make_recipe())

        result = validate_breeding(parent, parent, 0, {}, cost)

        assert len(result.errors) == 5
        assert result.errors[0] == "Cannot breed a creature with itself"
        assert result.errors[-1] == "Need 5 more Slime Gel"
        assert result.warnings == ("One or both parents are exhausted (reduced stats)",)

    def test_exhaustion_warning_does_not_block(self, parent1):
        tired = make_creature("tired", exhaustion_level=2)

        result = validate_breeding(parent1, tired)

        assert result.valid is True
        assert result.warnings == ("One or both parents are exhausted (reduced stats)",)

    def test_affordability_skipped_without_cost(self, parent1, parent2):
        assert validate_breeding(parent1, parent2, player_gold=0).valid is True

    @given(
        gold=st.integers(min_value=0, max_value=10**9),
        generation=st.integers(min_value=0, max_value=5),
        exhaustion=st.integers(min_value=0, max_value=10),
    )
    @settings(max_examples=100)
    def test_self_breeding_always_rejected(self, gold, generation, exhaustion):
        """
        Property: a creature can never be bred with itself.

        Invariant: holds regardless of gold, generation or exhaustion.
        """
        creature = make_creature("solo", generation=generation, exhaustion_level=exhaustion)
        cost = calculate_breeding_cost(creature, creature)

        result = validate_breeding(creature, creature, gold, None, cost)

        assert result.valid is False
        assert "Cannot breed a creature with itself" in result.errors


class TestValidateBreedingCost:
    """Tests for validate_breeding_cost"""

    def test_affordable(self, parent1, parent2):
        cost = calculate_breeding_cost(parent1, parent2)

        check = validate_breeding_cost(cost, 1000)

        assert check.can_afford is True
        assert check.gold_shortfall == 0
        assert check.missing_materials == ()

    def test_shortfalls_reported(self, parent1, parent2):
        cost = calculate_breeding_cost(parent1, parent2, make_recipe())

        check = validate_breeding_cost(cost, 250, {"slime_gel": 1})

        assert check.can_afford is False
        assert check.gold_shortfall == 750
        assert len(check.missing_materials) == 1
        assert check.missing_materials[0].item_id == "slime_gel"
        assert check.missing_materials[0].quantity == 4

    def test_no_inventory_means_nothing_owned(self, parent1, parent2):
        cost = calculate_breeding_cost(parent1, parent2, make_recipe())

        check = validate_breeding_cost(cost, 5000)

        assert check.can_afford is False
        assert check.missing_materials[0].quantity == 5
