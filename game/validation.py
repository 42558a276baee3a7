"""
Breeding validation

Every expected failure is reported as data so a caller can show all of
them at once. Nothing here raises for a player-facing problem.
"""
import logging
from typing import Mapping, Optional

from core.config import BreedingConfig
from core.game_logic import material_shortfalls, format_material_error
from core.models import Creature, BreedingCost, ValidationResult, CostValidation
from game.exhaustion import can_breed

logger = logging.getLogger(__name__)


def validate_breeding(
    parent1: Optional[Creature],
    parent2: Optional[Creature],
    player_gold: int = 0,
    player_materials: Optional[Mapping[str, int]] = None,
    cost: Optional[BreedingCost] = None,
    config: Optional[BreedingConfig] = None,
) -> ValidationResult:
    """
    Validate breeding requirements for two creatures.

    Checks run in order and all accumulate:
    - both parents present and distinct
    - each parent passes can_breed
    - with a cost: enough gold, and enough of every required material

    A parent with exhaustion produces a warning, not an error.

    Args:
        parent1: First parent (None when not selected yet)
        parent2: Second parent (None when not selected yet)
        player_gold: Player's current gold
        player_materials: Player's material inventory (item_id -> quantity)
        cost: Precomputed breeding cost; affordability is skipped without it
        config: Optional tables (defaults to BREEDING_CONFIG)

    Returns:
        ValidationResult with errors and warnings
    """
    errors = []
    warnings = []

    if parent1 is None or parent2 is None:
        errors.append("Two parent creatures are required")
        return ValidationResult(valid=False, errors=tuple(errors), warnings=tuple(warnings))

    if parent1.creature_id == parent2.creature_id:
        errors.append("Cannot breed a creature with itself")

    if not can_breed(parent1, config=config):
        errors.append(f"{parent1.display_name} cannot breed (generation or exhaustion limit)")

    if not can_breed(parent2, config=config):
        errors.append(f"{parent2.display_name} cannot breed (generation or exhaustion limit)")

    if cost is not None:
        if cost.gold_amount > player_gold:
            shortfall = cost.gold_amount - player_gold
            errors.append(f"Insufficient gold (need {shortfall:,} more)")

        for material in material_shortfalls(cost.materials, player_materials):
            errors.append(format_material_error(material))

    if parent1.exhaustion_level > 0 or parent2.exhaustion_level > 0:
        warnings.append("One or both parents are exhausted (reduced stats)")

    if errors:
        logger.debug(f"Breeding {parent1.creature_id} x {parent2.creature_id} rejected: {errors}")

    return ValidationResult(valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_breeding_cost(
    cost: BreedingCost,
    player_gold: int,
    player_materials: Optional[Mapping[str, int]] = None,
) -> CostValidation:
    """
    Check only whether the player can pay a breeding cost.

    Used for UI pre-flight checks; parent eligibility is not examined.

    Returns:
        CostValidation with the gold shortfall and per-material shortages
    """
    gold_shortfall = max(0, cost.gold_amount - player_gold)
    missing_materials = tuple(material_shortfalls(cost.materials, player_materials))

    return CostValidation(
        can_afford=gold_shortfall == 0 and not missing_materials,
        gold_shortfall=gold_shortfall,
        missing_materials=missing_materials,
    )
