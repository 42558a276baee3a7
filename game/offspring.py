"""
Offspring generation

Runs one breeding as a linear pipeline: species, generation, stats, rarity,
abilities, traits, caps, cost. Eligibility and affordability are checked by
game.validation before this is called.
"""
import logging
import random
from typing import Dict, Optional

from core.config import BreedingConfig, resolve_config
from core.game_logic import higher_rarity, next_rarity, rarity_index, round_half_up
from core.models import (
    Creature, BreedingRecipe, BreedingResult, OffspringDraft, OffspringPreview,
    StatRange, STAT_KEYS,
)
from game.cost import calculate_breeding_cost
from game.inheritance import generation_bonus, inherit_abilities, inherit_passive_traits, inherit_stats
from game.rarity import roll_rarity_upgrade
from game.stat_caps import calculate_stat_caps

logger = logging.getLogger(__name__)


def determine_offspring_species(
    parent1: Creature,
    parent2: Creature,
    rng: random.Random,
    recipe: Optional[BreedingRecipe] = None,
) -> str:
    """Recipe species if any, else a 50/50 pick between the parent species"""
    if recipe is not None:
        return recipe.offspring_species

    return parent1.species if rng.random() < 0.5 else parent2.species


def resolve_offspring_generation(
    parent1: Creature,
    parent2: Creature,
    config: Optional[BreedingConfig] = None,
) -> int:
    """Higher parent generation + 1, capped at 5. Recipes never change it."""
    config = resolve_config(config)
    generation = max(parent1.generation, parent2.generation) + 1
    return min(generation, config.stat_inheritance.max_generation)


def generate_offspring(
    parent1: Creature,
    parent2: Creature,
    rng: random.Random,
    recipe: Optional[BreedingRecipe] = None,
    config: Optional[BreedingConfig] = None,
) -> BreedingResult:
    """
    Generate offspring from two parent creatures.

    Process:
    1. Offspring species (recipe species, else 50/50)
    2. Generation (max parent gen + 1, capped at 5)
    3. Inherited stats with generation bonus
    4. Rarity upgrade roll on the higher parent rarity
    5. Ability and passive trait inheritance
    6. Stat caps for the generation
    7. Offspring draft (level 1, rested, lineage set)
    8. Cost of the transaction

    Always succeeds; the caller validates first and persists the result.

    Args:
        parent1: First parent
        parent2: Second parent
        rng: Random source for every roll in this breeding
        recipe: Optional breeding recipe
        config: Optional tables (defaults to BREEDING_CONFIG)

    Returns:
        BreedingResult with the offspring draft
    """
    config = resolve_config(config)
    messages = []

    offspring_species = determine_offspring_species(parent1, parent2, rng, recipe)
    messages.append(f"Offspring species: {offspring_species}")

    generation = resolve_offspring_generation(parent1, parent2, config)
    messages.append(f"Generation {generation}")

    inherited_stats = inherit_stats(parent1.stats, parent2.stats, generation, rng, config)

    parent_rarity = higher_rarity(parent1.rarity, parent2.rarity)
    rarity_upgraded, final_rarity = roll_rarity_upgrade(parent_rarity, rng, recipe, config)
    if rarity_upgraded:
        messages.append(f"Rarity upgraded to {final_rarity.value}!")

    inherited_abilities = inherit_abilities(parent1.abilities, parent2.abilities, rng, recipe, config)
    if inherited_abilities:
        messages.append(f"Inherited {len(inherited_abilities)} abilities from parents")

    passive_traits = inherit_passive_traits(parent1.passive_traits, parent2.passive_traits, generation, rng, config)
    if passive_traits:
        messages.append(f"Inherited {len(passive_traits)} passive traits")

    stat_caps = calculate_stat_caps(generation, config)

    offspring = OffspringDraft(
        species=offspring_species,
        rarity=final_rarity,
        generation=generation,
        stats=inherited_stats,
        stat_caps=stat_caps,
        inherited_abilities=inherited_abilities,
        passive_traits=passive_traits,
        parent_ids=(parent1.creature_id, parent2.creature_id),
    )

    cost = calculate_breeding_cost(parent1, parent2, recipe, config)

    logger.debug(
        f"Offspring of {parent1.creature_id} x {parent2.creature_id}: {offspring_species} "
        f"gen {generation} {final_rarity.value} (upgraded={rarity_upgraded}), "
        f"{len(inherited_abilities)} abilities, {len(passive_traits)} traits"
    )

    return BreedingResult(
        success=True,
        offspring=offspring,
        messages=tuple(messages),
        inherited_abilities=inherited_abilities,
        rarity_upgraded=rarity_upgraded,
        generation=generation,
        offspring_species=offspring_species,
        cost_paid=cost,
        recipe_used=recipe,
    )


def preview_offspring(
    parent1: Creature,
    parent2: Creature,
    recipe: Optional[BreedingRecipe] = None,
    config: Optional[BreedingConfig] = None,
) -> OffspringPreview:
    """
    Describe what breeding two creatures could produce, without rolling.

    Stat ranges cover the low end of the average roll up to the better
    parent, both scaled by the generation bonus.
    The average weighs the mean average roll against the dominant-gene
    chance.
    """
    config = resolve_config(config)
    stat_config = config.stat_inheritance

    if recipe is not None:
        possible_species = ((recipe.offspring_species, 1.0),)
    elif parent1.species == parent2.species:
        possible_species = ((parent1.species, 1.0),)
    else:
        possible_species = ((parent1.species, 0.5), (parent2.species, 0.5))

    generation = resolve_offspring_generation(parent1, parent2, config)
    scale = generation_bonus(generation, config)

    mean_fraction = (stat_config.min_parent_average_percent + stat_config.max_parent_average_percent) / 2
    dominant_chance = stat_config.better_stat_inherit_chance

    estimated_stats: Dict[str, StatRange] = {}
    for stat in STAT_KEYS:
        value1 = parent1.stats.get(stat)
        value2 = parent2.stats.get(stat)
        average = (value1 + value2) / 2
        best = max(value1, value2)
        expected = (1 - dominant_chance) * average * mean_fraction + dominant_chance * best
        estimated_stats[stat] = StatRange(
            min=max(0, round_half_up(average * stat_config.min_parent_average_percent * scale)),
            max=max(0, round_half_up(max(best, average * stat_config.max_parent_average_percent) * scale)),
            average=max(0, round_half_up(expected * scale)),
        )

    current_rarity = higher_rarity(parent1.rarity, parent2.rarity)
    promoted = next_rarity(current_rarity, config.rarity_upgrade.rarity_progression)
    upgrade_chance = config.rarity_upgrade.upgrade_chance if promoted is not None else 0.0
    possible_rarity = promoted or current_rarity

    possible_abilities = list(parent1.abilities)
    for ability_id in parent2.abilities:
        if ability_id not in possible_abilities:
            possible_abilities.append(ability_id)

    if recipe is not None:
        min_rarity = recipe.bonuses.min_rarity
        if min_rarity is not None and rarity_index(min_rarity) > rarity_index(possible_rarity):
            possible_rarity = min_rarity
        for ability_id in recipe.bonuses.guaranteed_abilities:
            if ability_id not in possible_abilities:
                possible_abilities.append(ability_id)

    return OffspringPreview(
        possible_species=possible_species,
        estimated_stats=estimated_stats,
        generation=generation,
        rarity_upgrade_chance=upgrade_chance,
        current_rarity=current_rarity,
        possible_rarity=possible_rarity,
        possible_inherited_abilities=tuple(possible_abilities),
        cost=calculate_breeding_cost(parent1, parent2, recipe, config),
    )
