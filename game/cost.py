"""Breeding cost calculation"""
from typing import Optional

from core.config import BreedingConfig, resolve_config
from core.game_logic import higher_rarity, round_half_up
from core.models import Creature, BreedingRecipe, BreedingCost, CostBreakdown, Rarity


def get_rarity_multiplier(rarity1: Rarity, rarity2: Rarity, config: Optional[BreedingConfig] = None) -> int:
    """Cost multiplier of the higher of two rarities (2 ** tier)"""
    config = resolve_config(config)
    return config.cost.rarity_multipliers[higher_rarity(rarity1, rarity2).value]


def calculate_breeding_cost(
    parent1: Creature,
    parent2: Creature,
    recipe: Optional[BreedingRecipe] = None,
    config: Optional[BreedingConfig] = None,
) -> BreedingCost:
    """
    Calculate the gold and material cost for breeding two creatures.

    Cost formula:
    - Base: 100 x (parent1.level + parent2.level)
    - Rarity: x1 common ... x32 mythical, using the higher parent rarity
    - Generation: x1.5 per level of the higher parent generation
    - Breeding count: x1.2 per previous breeding, on each parent

    Always returns a cost; whether the player can pay it is checked by
    validation.

    Args:
        parent1: First parent
        parent2: Second parent
        recipe: Optional recipe (supplies the material list)
        config: Optional tables (defaults to BREEDING_CONFIG)

    Returns:
        BreedingCost with a breakdown of every factor
    """
    config = resolve_config(config)
    cost_config = config.cost

    base_cost = cost_config.base_cost_per_level * (parent1.level + parent2.level)
    rarity_multiplier = get_rarity_multiplier(parent1.rarity, parent2.rarity, config)

    max_generation = max(parent1.generation, parent2.generation)
    generation_multiplier = cost_config.generation_multiplier_base ** max_generation

    breeding_count_multiplier = (
        cost_config.breeding_count_multiplier_base ** parent1.breeding_count
        * cost_config.breeding_count_multiplier_base ** parent2.breeding_count
    )

    total_gold = round_half_up(
        base_cost * rarity_multiplier * generation_multiplier * breeding_count_multiplier
    )

    if recipe is None:
        materials = ()
    else:
        materials = tuple(recipe.materials)

    return BreedingCost(
        gold_amount=total_gold,
        breakdown=CostBreakdown(
            base_cost=base_cost,
            rarity_multiplier=rarity_multiplier,
            generation_multiplier=generation_multiplier,
            breeding_count_multiplier=breeding_count_multiplier,
            total_gold=total_gold,
        ),
        materials=materials,
    )
