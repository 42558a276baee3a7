"""Generation-based stat caps"""
from typing import Optional

from core.config import BreedingConfig, resolve_config, MIN_GENERATION, MAX_GENERATION
from core.game_logic import round_half_up
from core.models import StatBlock


def calculate_stat_caps(generation: int, config: Optional[BreedingConfig] = None) -> StatBlock:
    """
    Calculate stat caps for a generation.

    Caps grow +10% per generation: 100 at Gen 0 up to 150 at Gen 5,
    the same for every stat.

    Raises:
        ValueError: if generation is outside 0-5
    """
    if not MIN_GENERATION <= generation <= MAX_GENERATION:
        raise ValueError(f"generation must be between {MIN_GENERATION} and {MAX_GENERATION} (got {generation})")

    config = resolve_config(config)
    cap_config = config.stat_caps
    cap = round_half_up(cap_config.base_cap * (1 + generation * cap_config.cap_bonus_per_generation))
    return StatBlock.uniform(cap)
