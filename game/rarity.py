"""Rarity upgrade rolls"""
import random
from typing import Optional, Tuple

from core.config import BreedingConfig, resolve_config
from core.game_logic import next_rarity, rarity_index, roll
from core.models import Rarity, BreedingRecipe


def roll_rarity_upgrade(
    parent_rarity: Rarity,
    rng: random.Random,
    recipe: Optional[BreedingRecipe] = None,
    config: Optional[BreedingConfig] = None,
) -> Tuple[bool, Rarity]:
    """
    Roll for a rarity upgrade (10% chance to go up one tier).

    A recipe's minimum rarity lifts the result but never counts as an
    upgrade; only the random roll sets the flag. Mythical cannot upgrade.

    Args:
        parent_rarity: Higher of the two parent rarities
        rng: Random source (exactly one draw)
        recipe: Optional recipe (may guarantee a minimum rarity)
        config: Optional tables (defaults to BREEDING_CONFIG)

    Returns:
        Tuple of (upgraded, final_rarity)
    """
    config = resolve_config(config)
    upgrade_config = config.rarity_upgrade
    progression = upgrade_config.rarity_progression

    final_rarity = Rarity.parse(parent_rarity)
    upgraded = False

    if roll(rng, upgrade_config.upgrade_chance):
        promoted = next_rarity(final_rarity, progression)
        if promoted is not None:
            final_rarity = promoted
            upgraded = True

    if recipe is not None:
        min_rarity = recipe.bonuses.min_rarity
        if min_rarity is not None and rarity_index(min_rarity, progression) > rarity_index(final_rarity, progression):
            final_rarity = min_rarity

    return upgraded, final_rarity
