"""Breeding transaction - pure functions over creature snapshots"""
import logging
import random
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from core.config import BreedingConfig
from core.models import (
    Creature, BreedingRecipe, BreedingResult, MaterialRequirement, ValidationResult,
)
from game.cost import calculate_breeding_cost
from game.exhaustion import apply_exhaustion
from game.offspring import generate_offspring
from game.recipes import recipe_matches_parents
from game.validation import validate_breeding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreedingTransaction:
    """
    Outcome of one breeding request.

    On a rejected request ``result`` is None, nothing is spent and the
    parents are returned as given. The caller persists the offspring,
    the exhausted parents and the spent resources.
    """
    validation: ValidationResult
    result: Optional[BreedingResult]
    parent1: Optional[Creature]
    parent2: Optional[Creature]
    gold_spent: int = 0
    materials_spent: Tuple[MaterialRequirement, ...] = ()

    @property
    def success(self) -> bool:
        return self.result is not None


def breed(
    parent1: Optional[Creature],
    parent2: Optional[Creature],
    rng: random.Random,
    player_gold: int = 0,
    player_materials: Optional[Mapping[str, int]] = None,
    recipe: Optional[BreedingRecipe] = None,
    config: Optional[BreedingConfig] = None,
) -> BreedingTransaction:
    """
    Breed two creatures.

    Validates, prices, generates the offspring and exhausts both parents.
    Expected failures come back in ``validation``; nothing is raised for them.

    Returns:
        BreedingTransaction with the offspring and updated parents
    """
    cost = None
    if parent1 is not None and parent2 is not None:
        cost = calculate_breeding_cost(parent1, parent2, recipe, config)

    validation = validate_breeding(parent1, parent2, player_gold, player_materials, cost, config)

    if recipe is not None and parent1 is not None and parent2 is not None:
        if not recipe_matches_parents(recipe, parent1, parent2):
            validation = ValidationResult(
                valid=False,
                errors=validation.errors + (f"{recipe.name} does not apply to these parents",),
                warnings=validation.warnings,
            )

    if not validation.valid:
        return BreedingTransaction(validation=validation, result=None, parent1=parent1, parent2=parent2)

    result = generate_offspring(parent1, parent2, rng, recipe, config)

    logger.info(
        f"Bred {parent1.creature_id} x {parent2.creature_id} -> {result.offspring_species} "
        f"gen {result.generation} for {cost.gold_amount} gold"
    )

    return BreedingTransaction(
        validation=validation,
        result=result,
        parent1=apply_exhaustion(parent1, config),
        parent2=apply_exhaustion(parent2, config),
        gold_spent=cost.gold_amount,
        materials_spent=cost.materials,
    )
