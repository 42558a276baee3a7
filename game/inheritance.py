"""
Inheritance rules for stats, abilities and passive traits

Every function that rolls takes the RNG as an argument. Draw order is part of
the contract: replaying the same RNG state reproduces the same offspring.
"""
import logging
import random
from typing import List, Optional, Sequence, Tuple

from core.config import BreedingConfig, resolve_config
from core.game_logic import roll, round_half_up
from core.models import StatBlock, BreedingRecipe, STAT_KEYS

logger = logging.getLogger(__name__)


def generation_bonus(generation: int, config: Optional[BreedingConfig] = None) -> float:
    """Stat multiplier for a generation (+5% per generation)"""
    config = resolve_config(config)
    return 1 + generation * config.stat_inheritance.generation_bonus_percent


def inherit_stats(
    parent1_stats: StatBlock,
    parent2_stats: StatBlock,
    generation: int,
    rng: random.Random,
    config: Optional[BreedingConfig] = None,
) -> StatBlock:
    """
    Calculate inherited stats from two parents.

    For each stat, independently:
    1. Random 70-90% of the parent average
    2. 40% chance to take the better parent's value instead (replaces step 1)
    3. Generation bonus: +5% per generation, then rounded

    Each stat draws the fraction first, then the dominant-gene roll.

    Args:
        parent1_stats: First parent's stats
        parent2_stats: Second parent's stats
        generation: Offspring generation (0-5)
        rng: Random source
        config: Optional tables (defaults to BREEDING_CONFIG)

    Returns:
        Integer stat block, no stat below 0
    """
    config = resolve_config(config)
    stat_config = config.stat_inheritance
    bonus = generation_bonus(generation, config)

    inherited = {}
    for stat in STAT_KEYS:
        value1 = parent1_stats.get(stat)
        value2 = parent2_stats.get(stat)
        average = (value1 + value2) / 2

        fraction = rng.uniform(
            stat_config.min_parent_average_percent,
            stat_config.max_parent_average_percent,
        )
        base_stat = average * fraction

        # Dominant gene
        if roll(rng, stat_config.better_stat_inherit_chance):
            base_stat = max(value1, value2)

        inherited[stat] = max(0, round_half_up(base_stat * bonus))

    return StatBlock(**inherited)


def inherit_abilities(
    parent1_abilities: Sequence[str],
    parent2_abilities: Sequence[str],
    rng: random.Random,
    recipe: Optional[BreedingRecipe] = None,
    config: Optional[BreedingConfig] = None,
) -> Tuple[str, ...]:
    """
    Determine which abilities are inherited from parents.

    Rules:
    - 30% chance to inherit each parent-1 ability, then each parent-2 ability
    - Recipe guaranteed abilities are appended after the rolls
    - The list is cut to the first 4 entries, so guarantees can be dropped
      when the rolls already filled every slot

    Args:
        parent1_abilities: First parent's ability ids
        parent2_abilities: Second parent's ability ids
        rng: Random source (one draw per parent ability)
        recipe: Optional recipe with guaranteed abilities
        config: Optional tables (defaults to BREEDING_CONFIG)

    Returns:
        Ability ids in insertion order, no duplicates
    """
    config = resolve_config(config)
    ability_config = config.ability_inheritance
    inherited: List[str] = []

    for ability_id in parent1_abilities:
        if roll(rng, ability_config.inherit_chance) and ability_id not in inherited:
            inherited.append(ability_id)

    for ability_id in parent2_abilities:
        if roll(rng, ability_config.inherit_chance) and ability_id not in inherited:
            inherited.append(ability_id)

    if recipe is not None:
        for ability_id in recipe.bonuses.guaranteed_abilities:
            if ability_id not in inherited:
                inherited.append(ability_id)

    limit = ability_config.max_inherited_abilities
    if len(inherited) > limit:
        logger.debug(f"Ability list truncated to {limit}: dropped {inherited[limit:]}")
    return tuple(inherited[:limit])


def inherit_passive_traits(
    parent1_traits: Sequence[str],
    parent2_traits: Sequence[str],
    generation: int,
    rng: random.Random,
    config: Optional[BreedingConfig] = None,
) -> Tuple[str, ...]:
    """
    Determine which passive traits are inherited from parents.

    Gen 0-2 offspring never get traits (and no draws are made). From Gen 3,
    each parent trait has a 25% chance, and the result is cut to the slot
    count for the generation (1/2/3 for Gen 3/4/5).
    """
    config = resolve_config(config)
    trait_config = config.passive_traits

    if generation < trait_config.min_generation:
        return ()

    inherited: List[str] = []
    for trait_id in parent1_traits:
        if roll(rng, trait_config.inherit_chance) and trait_id not in inherited:
            inherited.append(trait_id)

    for trait_id in parent2_traits:
        if roll(rng, trait_config.inherit_chance) and trait_id not in inherited:
            inherited.append(trait_id)

    # Mutation slot: the draw is made so the sequence stays stable once a
    # trait pool exists, but nothing is granted yet
    if roll(rng, trait_config.mutation_chance):
        logger.debug(f"Trait mutation rolled for generation {generation} (no trait pool configured)")

    max_traits = min(trait_config.traits_by_generation.get(generation, 0), trait_config.max_inherited_traits)
    return tuple(inherited[:max_traits])


def get_ability_slots(generation: int, config: Optional[BreedingConfig] = None) -> int:
    """Total ability slots (base + bonus) for a generation"""
    config = resolve_config(config)
    table = config.ability_inheritance.ability_slots_by_generation
    slots = table.get(generation, table[0])
    return slots.base_slots + slots.bonus_slots


def has_ultimate_slot(generation: int, config: Optional[BreedingConfig] = None) -> bool:
    """True if creatures of this generation get an ultimate ability slot"""
    config = resolve_config(config)
    table = config.ability_inheritance.ability_slots_by_generation
    return table.get(generation, table[0]).has_ultimate


def get_passive_trait_slots(generation: int, config: Optional[BreedingConfig] = None) -> int:
    """Passive trait slots for a generation"""
    config = resolve_config(config)
    return config.passive_traits.traits_by_generation.get(generation, 0)
