"""
Exhaustion mechanics

Each breeding leaves a parent exhausted: -20% stats per exhaustion level.
Functions return new creature snapshots and never modify their input.
"""
import logging
from dataclasses import replace
from typing import Optional

from core.config import BreedingConfig, resolve_config
from core.game_logic import round_half_up
from core.models import Creature

logger = logging.getLogger(__name__)


def exhaustion_multiplier(exhaustion_level: int, config: Optional[BreedingConfig] = None) -> float:
    """Stat multiplier at an exhaustion level (1.0 when rested)"""
    config = resolve_config(config)
    return 1 - exhaustion_level * config.exhaustion.penalty_per_level


def apply_exhaustion(creature: Creature, config: Optional[BreedingConfig] = None) -> Creature:
    """
    Apply exhaustion to a creature after breeding.

    Increments breeding_count and exhaustion_level, then scales the stored
    stats by the multiplier for the new level. The stored stats may already
    carry an earlier penalty, so repeated calls compound: 100 -> 80 at
    level 1, and a stored 100 at level 2 becomes 40 at level 3.

    Args:
        creature: Parent creature as stored before this breeding
        config: Optional tables (defaults to BREEDING_CONFIG)

    Returns:
        New creature snapshot
    """
    new_breeding_count = creature.breeding_count + 1
    new_exhaustion_level = creature.exhaustion_level + 1
    multiplier = exhaustion_multiplier(new_exhaustion_level, config)

    exhausted_stats = creature.stats.map(lambda _, value: max(0, round_half_up(value * multiplier)))

    logger.debug(
        f"Exhaustion applied to {creature.creature_id}: level {new_exhaustion_level}, "
        f"multiplier {multiplier:.2f}"
    )
    return replace(
        creature,
        breeding_count=new_breeding_count,
        exhaustion_level=new_exhaustion_level,
        stats=exhausted_stats,
    )


def remove_exhaustion(
    creature: Creature,
    levels_to_remove: int,
    config: Optional[BreedingConfig] = None,
) -> Creature:
    """
    Remove exhaustion levels from a creature (items or rest).

    Stats are rebuilt by dividing out the current multiplier and applying
    the one for the new level, so removing every level restores the
    pre-penalty values (within rounding). At a multiplier of 0 the stats
    cannot be recovered and stay as stored.

    Raises:
        ValueError: if levels_to_remove is negative
    """
    if levels_to_remove < 0:
        raise ValueError(f"levels_to_remove cannot be negative (got {levels_to_remove})")

    config = resolve_config(config)
    if not config.exhaustion.allow_recovery:
        logger.info(f"Exhaustion recovery disabled; {creature.creature_id} unchanged")
        return creature

    new_exhaustion_level = max(0, creature.exhaustion_level - levels_to_remove)
    current_multiplier = exhaustion_multiplier(creature.exhaustion_level, config)
    new_multiplier = exhaustion_multiplier(new_exhaustion_level, config)

    def restore(_, value):
        original = value / current_multiplier if current_multiplier > 0 else value
        return max(0, round_half_up(original * new_multiplier))

    return replace(
        creature,
        exhaustion_level=new_exhaustion_level,
        stats=creature.stats.map(restore),
    )


def calculate_recovery_cost(exhaustion_level: int, config: Optional[BreedingConfig] = None) -> int:
    """Gold needed to clear all exhaustion: 100 per level"""
    config = resolve_config(config)
    return config.exhaustion.recovery_cost_per_level * max(0, exhaustion_level)


def can_breed(
    creature: Creature,
    max_exhaustion: Optional[int] = None,
    config: Optional[BreedingConfig] = None,
) -> bool:
    """
    Check if a creature can breed.

    Gen 5 creatures cannot breed, nor can creatures at or above the
    exhaustion limit (default 5).
    """
    config = resolve_config(config)
    if max_exhaustion is None:
        max_exhaustion = config.exhaustion.max_exhaustion

    if creature.generation >= config.stat_inheritance.max_generation:
        return False

    if creature.exhaustion_level >= max_exhaustion:
        return False

    return True
