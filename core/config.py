"""Breeding configuration constants

All tables are built once at import and are read-only. Functions that accept
a ``config`` argument fall back to ``BREEDING_CONFIG`` when it is None, so a
tuning experiment passes its own instance instead of patching globals.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


# Rarity tiers, lowest first (order matters for upgrades and cost)
RARITY_PROGRESSION: Tuple[str, ...] = (
    "common",
    "uncommon",
    "rare",
    "epic",
    "legendary",
    "mythical",
)

# Gold cost multiplier per rarity tier (2 ** tier index)
RARITY_COST_MULTIPLIERS: Mapping[str, int] = MappingProxyType({
    rarity: 2 ** index for index, rarity in enumerate(RARITY_PROGRESSION)
})

MIN_GENERATION = 0
MAX_GENERATION = 5

# Bumped whenever a formula or table below changes (part of the RNG seed)
BREEDING_CONFIG_VERSION = "1"


@dataclass(frozen=True)
class StatInheritanceConfig:
    """Stat inheritance tuning"""
    min_parent_average_percent: float = 0.70
    max_parent_average_percent: float = 0.90
    better_stat_inherit_chance: float = 0.40
    generation_bonus_percent: float = 0.05
    max_generation: int = MAX_GENERATION


@dataclass(frozen=True)
class RarityUpgradeConfig:
    """Rarity upgrade tuning"""
    upgrade_chance: float = 0.10
    rarity_progression: Tuple[str, ...] = RARITY_PROGRESSION


@dataclass(frozen=True)
class AbilitySlots:
    """Ability slots available at one generation"""
    base_slots: int
    bonus_slots: int
    has_ultimate: bool = False


ABILITY_SLOTS_BY_GENERATION: Mapping[int, AbilitySlots] = MappingProxyType({
    0: AbilitySlots(base_slots=4, bonus_slots=0),
    1: AbilitySlots(base_slots=4, bonus_slots=0),
    2: AbilitySlots(base_slots=4, bonus_slots=1),
    3: AbilitySlots(base_slots=4, bonus_slots=2),
    4: AbilitySlots(base_slots=4, bonus_slots=3),
    5: AbilitySlots(base_slots=4, bonus_slots=4, has_ultimate=True),
})


@dataclass(frozen=True)
class AbilityInheritanceConfig:
    """Ability inheritance tuning"""
    inherit_chance: float = 0.30
    max_inherited_abilities: int = 4
    ability_slots_by_generation: Mapping[int, AbilitySlots] = field(default_factory=lambda: ABILITY_SLOTS_BY_GENERATION)


TRAITS_BY_GENERATION: Mapping[int, int] = MappingProxyType({
    0: 0,
    1: 0,
    2: 0,
    3: 1,
    4: 2,
    5: 3,
})


@dataclass(frozen=True)
class PassiveTraitConfig:
    """Passive trait inheritance tuning"""
    inherit_chance: float = 0.25
    max_inherited_traits: int = 3
    mutation_chance: float = 0.05
    min_generation: int = 3
    traits_by_generation: Mapping[int, int] = field(default_factory=lambda: TRAITS_BY_GENERATION)


@dataclass(frozen=True)
class ExhaustionConfig:
    """Exhaustion penalty and recovery tuning"""
    penalty_per_level: float = 0.20
    allow_recovery: bool = True
    recovery_cost_per_level: int = 100
    max_exhaustion: int = 5


@dataclass(frozen=True)
class CostConfig:
    """Gold cost formula tuning"""
    base_cost_per_level: int = 100
    generation_multiplier_base: float = 1.5
    breeding_count_multiplier_base: float = 1.2
    rarity_multipliers: Mapping[str, int] = field(default_factory=lambda: RARITY_COST_MULTIPLIERS)


@dataclass(frozen=True)
class StatCapConfig:
    """Per-generation stat ceilings"""
    base_cap: int = 100
    cap_bonus_per_generation: float = 0.10


@dataclass(frozen=True)
class BreedingConfig:
    """Every breeding table in one place"""
    stat_inheritance: StatInheritanceConfig = field(default_factory=StatInheritanceConfig)
    rarity_upgrade: RarityUpgradeConfig = field(default_factory=RarityUpgradeConfig)
    ability_inheritance: AbilityInheritanceConfig = field(default_factory=AbilityInheritanceConfig)
    passive_traits: PassiveTraitConfig = field(default_factory=PassiveTraitConfig)
    exhaustion: ExhaustionConfig = field(default_factory=ExhaustionConfig)
    cost: CostConfig = field(default_factory=CostConfig)
    stat_caps: StatCapConfig = field(default_factory=StatCapConfig)
    version: str = BREEDING_CONFIG_VERSION


BREEDING_CONFIG = BreedingConfig()


def resolve_config(config: Optional[BreedingConfig] = None) -> BreedingConfig:
    """Return ``config`` or the default tables"""
    if config is None:
        return BREEDING_CONFIG
    return config
