"""Breeding history ledger"""
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from core.models import BreedingResult


@dataclass(frozen=True)
class BreedingAttempt:
    """One recorded breeding, successful or not"""
    attempt_id: str
    timestamp: float
    parent1_id: str
    parent2_id: str
    parent1_species: str
    parent2_species: str
    gold_cost: int
    result: Optional[BreedingResult] = None
    recipe_id: Optional[str] = None

    @property
    def successful(self) -> bool:
        return self.result is not None and self.result.success


@dataclass
class BreedingState:
    """
    Player-level breeding progress.

    Updated only through ``record_attempt``, which works on a copy.
    """
    breeding_attempts: int = 0
    discovered_recipes: List[str] = field(default_factory=list)
    total_creatures_bred: int = 0
    highest_generation: int = 0
    special_combinations_discovered: int = 0
    history: List[BreedingAttempt] = field(default_factory=list)

    def copy(self) -> "BreedingState":
        """Create a copy of this state (for immutable updates)"""
        return BreedingState(
            breeding_attempts=self.breeding_attempts,
            discovered_recipes=list(self.discovered_recipes),
            total_creatures_bred=self.total_creatures_bred,
            highest_generation=self.highest_generation,
            special_combinations_discovered=self.special_combinations_discovered,
            # Attempts are frozen, so a shallow copy of the list is enough
            history=copy.copy(self.history),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "breeding_attempts": self.breeding_attempts,
            "discovered_recipes": list(self.discovered_recipes),
            "total_creatures_bred": self.total_creatures_bred,
            "highest_generation": self.highest_generation,
            "special_combinations_discovered": self.special_combinations_discovered,
            "history": [attempt.attempt_id for attempt in self.history],
        }


def record_attempt(state: BreedingState, attempt: BreedingAttempt) -> BreedingState:
    """
    Record a breeding attempt.

    Every attempt counts. A successful one also counts a bred creature,
    raises the highest generation, and discovers its recipe the first
    time that recipe is used.

    Returns:
        New state; the given one is left unchanged
    """
    new_state = state.copy()
    new_state.breeding_attempts += 1
    new_state.history.append(attempt)

    if not attempt.successful:
        return new_state

    new_state.total_creatures_bred += 1
    new_state.highest_generation = max(new_state.highest_generation, attempt.result.generation)

    if attempt.recipe_id and attempt.recipe_id not in new_state.discovered_recipes:
        new_state.discovered_recipes.append(attempt.recipe_id)
        new_state.special_combinations_discovered += 1

    return new_state
