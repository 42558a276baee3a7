"""Breeding data models"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .config import RARITY_PROGRESSION, MIN_GENERATION, MAX_GENERATION


class Rarity(str, Enum):
    """Rarity tier, ordered by position in RARITY_PROGRESSION"""
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHICAL = "mythical"

    @property
    def tier(self) -> int:
        return RARITY_PROGRESSION.index(self.value)

    @classmethod
    def parse(cls, value: Any) -> "Rarity":
        """Parse a rarity from host data (case-insensitive)"""
        if isinstance(value, Rarity):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown rarity: {value!r}") from None

    def __str__(self) -> str:
        return self.value


STAT_KEYS: Tuple[str, ...] = (
    "attack",
    "defense",
    "magic_attack",
    "magic_defense",
    "speed",
    "accuracy",
)

# Host snapshots use camelCase keys
_CAMEL_KEYS = {
    "magic_attack": "magicAttack",
    "magic_defense": "magicDefense",
    "creature_id": "creatureId",
    "breeding_count": "breedingCount",
    "exhaustion_level": "exhaustionLevel",
    "passive_traits": "passiveTraits",
    "parent_ids": "parentIds",
    "stat_caps": "statCaps",
}


def _read(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Read a snake_case key, falling back to its camelCase spelling"""
    if key in data:
        return data[key]
    return data.get(_CAMEL_KEYS.get(key, key), default)


@dataclass(frozen=True)
class StatBlock:
    """The six combat stats"""
    attack: float = 0
    defense: float = 0
    magic_attack: float = 0
    magic_defense: float = 0
    speed: float = 0
    accuracy: float = 0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "StatBlock":
        """Missing stats read as 0"""
        data = data or {}
        return cls(**{key: _read(data, key, 0) or 0 for key in STAT_KEYS})

    @classmethod
    def uniform(cls, value: float) -> "StatBlock":
        return cls(**{key: value for key in STAT_KEYS})

    def get(self, key: str) -> float:
        return getattr(self, key)

    def map(self, fn: Callable[[str, float], float]) -> "StatBlock":
        """Build a new block by applying ``fn(key, value)`` to every stat"""
        return StatBlock(**{key: fn(key, getattr(self, key)) for key in STAT_KEYS})

    def to_dict(self) -> Dict[str, float]:
        return {key: getattr(self, key) for key in STAT_KEYS}


@dataclass(frozen=True)
class Creature:
    """Read-only snapshot of a host-owned creature record"""
    creature_id: str
    species: str
    name: str = ""
    level: int = 1
    rarity: Rarity = Rarity.COMMON
    generation: int = 0
    breeding_count: int = 0
    exhaustion_level: int = 0
    stats: StatBlock = field(default_factory=StatBlock)
    abilities: Tuple[str, ...] = ()
    passive_traits: Tuple[str, ...] = ()
    parent_ids: Tuple[str, ...] = ()
    stat_caps: Optional[StatBlock] = None

    def __post_init__(self):
        # Normalize loosely typed host values
        object.__setattr__(self, "rarity", Rarity.parse(self.rarity))
        object.__setattr__(self, "abilities", tuple(self.abilities))
        object.__setattr__(self, "passive_traits", tuple(self.passive_traits))
        object.__setattr__(self, "parent_ids", tuple(self.parent_ids))

    @property
    def display_name(self) -> str:
        return self.name or self.species

    def validate(self) -> Tuple[bool, Optional[str]]:
        """Check record invariants"""
        if not self.creature_id:
            return False, "creature_id cannot be empty"
        if self.level < 1:
            return False, f"level must be at least 1 (got {self.level})"
        if not MIN_GENERATION <= self.generation <= MAX_GENERATION:
            return False, f"generation must be between {MIN_GENERATION} and {MAX_GENERATION} (got {self.generation})"
        if self.breeding_count < 0:
            return False, f"breeding_count cannot be negative (got {self.breeding_count})"
        if self.exhaustion_level < 0:
            return False, f"exhaustion_level cannot be negative (got {self.exhaustion_level})"
        if len(self.parent_ids) > 2:
            return False, "a creature has at most two parents"
        return True, None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Creature":
        """
        Build a snapshot from a host record.

        Raises:
            ValueError: if the record breaks an invariant
        """
        abilities = _read(data, "abilities", []) or []
        caps = _read(data, "stat_caps")
        creature = cls(
            creature_id=str(_read(data, "creature_id", data.get("id", ""))),
            species=str(data.get("species", "")),
            name=str(data.get("name", "") or ""),
            level=int(data.get("level", 1)),
            rarity=Rarity.parse(data.get("rarity", Rarity.COMMON)),
            generation=int(_read(data, "generation", 0) or 0),
            breeding_count=int(_read(data, "breeding_count", 0) or 0),
            exhaustion_level=int(_read(data, "exhaustion_level", 0) or 0),
            stats=StatBlock.from_dict(data.get("stats")),
            # Abilities may arrive as ids or as {"id": ...} objects
            abilities=tuple(a if isinstance(a, str) else a["id"] for a in abilities),
            passive_traits=tuple(_read(data, "passive_traits", []) or []),
            parent_ids=tuple(_read(data, "parent_ids", []) or []),
            stat_caps=StatBlock.from_dict(caps) if caps else None,
        )
        is_valid, error = creature.validate()
        if not is_valid:
            raise ValueError(f"Invalid creature record: {error}")
        return creature

    def to_dict(self) -> Dict[str, Any]:
        return {
            "creature_id": self.creature_id,
            "species": self.species,
            "name": self.name,
            "level": self.level,
            "rarity": self.rarity.value,
            "generation": self.generation,
            "breeding_count": self.breeding_count,
            "exhaustion_level": self.exhaustion_level,
            "stats": self.stats.to_dict(),
            "abilities": list(self.abilities),
            "passive_traits": list(self.passive_traits),
            "parent_ids": list(self.parent_ids),
            "stat_caps": self.stat_caps.to_dict() if self.stat_caps else None,
        }


@dataclass(frozen=True)
class OffspringDraft:
    """
    Offspring produced by a breeding run.

    A draft has no identity. The caller assigns one with ``to_creature``
    before persisting it.
    """
    species: str
    rarity: Rarity
    generation: int
    stats: StatBlock
    stat_caps: StatBlock
    inherited_abilities: Tuple[str, ...] = ()
    passive_traits: Tuple[str, ...] = ()
    parent_ids: Tuple[str, ...] = ()
    level: int = 1
    breeding_count: int = 0
    exhaustion_level: int = 0

    def to_creature(self, creature_id: str, name: Optional[str] = None) -> Creature:
        return Creature(
            creature_id=creature_id,
            species=self.species,
            name=name or self.species.replace("_", " ").title(),
            level=self.level,
            rarity=self.rarity,
            generation=self.generation,
            breeding_count=self.breeding_count,
            exhaustion_level=self.exhaustion_level,
            stats=self.stats,
            abilities=self.inherited_abilities,
            passive_traits=self.passive_traits,
            parent_ids=self.parent_ids,
            stat_caps=self.stat_caps,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "species": self.species,
            "level": self.level,
            "rarity": self.rarity.value,
            "generation": self.generation,
            "breeding_count": self.breeding_count,
            "exhaustion_level": self.exhaustion_level,
            "stats": self.stats.to_dict(),
            "stat_caps": self.stat_caps.to_dict(),
            "inherited_abilities": list(self.inherited_abilities),
            "passive_traits": list(self.passive_traits),
            "parent_ids": list(self.parent_ids),
        }


@dataclass(frozen=True)
class MaterialRequirement:
    """An item and quantity consumed by a recipe"""
    item_id: str
    quantity: int
    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.item_id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MaterialRequirement":
        return cls(
            item_id=str(data.get("item_id") or data["itemId"]),
            quantity=int(data["quantity"]),
            name=str(data.get("name", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"item_id": self.item_id, "quantity": self.quantity, "name": self.name}


@dataclass(frozen=True)
class MissingMaterial:
    """Recipe material the player is short of"""
    item_id: str
    name: str
    have: int
    need: int


@dataclass(frozen=True)
class RecipeProgress:
    """How much of the recipe catalog a player has uncovered"""
    discovered: int
    available: int
    total: int
    percentage: int


@dataclass(frozen=True)
class GuaranteedBonuses:
    """Outcome guarantees granted by a recipe"""
    stat_multiplier: float = 1.0
    min_rarity: Optional[Rarity] = None
    guaranteed_abilities: Tuple[str, ...] = ()
    generation_bonus: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GuaranteedBonuses":
        data = data or {}
        min_rarity = data.get("min_rarity", data.get("minRarity"))
        return cls(
            stat_multiplier=float(data.get("stat_multiplier", data.get("statMultiplier", 1.0))),
            min_rarity=Rarity.parse(min_rarity) if min_rarity else None,
            guaranteed_abilities=tuple(data.get("guaranteed_abilities", data.get("guaranteedAbilities", []))),
            generation_bonus=int(data.get("generation_bonus", data.get("generationBonus", 0))),
        )


@dataclass(frozen=True)
class UnlockRequirements:
    """Conditions a player must meet before a recipe can be used"""
    story_flags: Tuple[str, ...] = ()
    min_player_level: int = 0
    required_creatures: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "UnlockRequirements":
        data = data or {}
        return cls(
            story_flags=tuple(data.get("story_flags", data.get("storyFlags", []))),
            min_player_level=int(data.get("min_player_level", data.get("minPlayerLevel", 0))),
            required_creatures=tuple(data.get("required_creatures", data.get("requiredCreatures", []))),
        )


@dataclass(frozen=True)
class BreedingRecipe:
    """
    A special parent combination with a fixed offspring species.

    A parent species of None matches any species.
    """
    recipe_id: str
    name: str
    offspring_species: str
    parent_species1: Optional[str] = None
    parent_species2: Optional[str] = None
    materials: Tuple[MaterialRequirement, ...] = ()
    bonuses: GuaranteedBonuses = field(default_factory=GuaranteedBonuses)
    unlock: UnlockRequirements = field(default_factory=UnlockRequirements)
    description: str = ""
    hint: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BreedingRecipe":
        """
        Parse a catalog entry.

        Raises:
            KeyError: if id, name or offspring species are missing
        """
        return cls(
            recipe_id=str(data.get("id") or data["recipe_id"]),
            name=str(data["name"]),
            offspring_species=str(data.get("offspring_species") or data["offspringSpecies"]),
            parent_species1=data.get("parent_species1", data.get("parentSpecies1")),
            parent_species2=data.get("parent_species2", data.get("parentSpecies2")),
            materials=tuple(MaterialRequirement.from_dict(m) for m in data.get("materials", [])),
            bonuses=GuaranteedBonuses.from_dict(data.get("guaranteed_bonuses", data.get("guaranteedBonuses"))),
            unlock=UnlockRequirements.from_dict(data.get("unlock_requirements", data.get("unlockRequirements"))),
            description=str(data.get("description", "")),
            hint=str(data.get("hint", "")),
        )


@dataclass(frozen=True)
class BreedingMaterial:
    """Catalog entry for a breeding material item"""
    material_id: str
    name: str
    rarity: Rarity = Rarity.COMMON
    description: str = ""
    drop_rate: float = 0.0
    value: int = 0
    dropped_by: Tuple[str, ...] = ()
    stack_limit: int = 99

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BreedingMaterial":
        return cls(
            material_id=str(data["id"]),
            name=str(data["name"]),
            rarity=Rarity.parse(data.get("rarity", Rarity.COMMON)),
            description=str(data.get("description", "")),
            drop_rate=float(data.get("drop_rate", data.get("dropRate", 0.0))),
            value=int(data.get("value", 0)),
            dropped_by=tuple(data.get("dropped_by", data.get("droppedBy", []))),
            stack_limit=int(data.get("stack_limit", data.get("stackLimit", 99))),
        )


@dataclass(frozen=True)
class CostBreakdown:
    """Every factor of the gold cost, for display"""
    base_cost: int
    rarity_multiplier: int
    generation_multiplier: float
    breeding_count_multiplier: float
    total_gold: int


@dataclass(frozen=True)
class BreedingCost:
    """Gold and materials charged for one breeding"""
    gold_amount: int
    breakdown: CostBreakdown
    materials: Tuple[MaterialRequirement, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gold_amount": self.gold_amount,
            "breakdown": {
                "base_cost": self.breakdown.base_cost,
                "rarity_multiplier": self.breakdown.rarity_multiplier,
                "generation_multiplier": self.breakdown.generation_multiplier,
                "breeding_count_multiplier": self.breakdown.breeding_count_multiplier,
                "total_gold": self.breakdown.total_gold,
            },
            "materials": [m.to_dict() for m in self.materials],
        }


@dataclass(frozen=True)
class BreedingResult:
    """One-shot record of a breeding run"""
    success: bool
    offspring: OffspringDraft
    messages: Tuple[str, ...]
    inherited_abilities: Tuple[str, ...]
    rarity_upgraded: bool
    generation: int
    offspring_species: str
    cost_paid: BreedingCost
    recipe_used: Optional[BreedingRecipe] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "offspring": self.offspring.to_dict(),
            "messages": list(self.messages),
            "inherited_abilities": list(self.inherited_abilities),
            "rarity_upgraded": self.rarity_upgraded,
            "generation": self.generation,
            "offspring_species": self.offspring_species,
            "cost_paid": self.cost_paid.to_dict(),
            "recipe_used": self.recipe_used.recipe_id if self.recipe_used else None,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Eligibility check outcome; errors block breeding, warnings do not"""
    valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CostValidation:
    """Affordability check outcome"""
    can_afford: bool
    gold_shortfall: int
    # quantity holds the shortage, not the requirement
    missing_materials: Tuple[MaterialRequirement, ...] = ()


@dataclass(frozen=True)
class StatRange:
    """Predicted spread of one offspring stat"""
    min: int
    max: int
    average: int


@dataclass(frozen=True)
class OffspringPreview:
    """What a breeding could produce, computed without rolling"""
    possible_species: Tuple[Tuple[str, float], ...]
    estimated_stats: Mapping[str, StatRange]
    generation: int
    rarity_upgrade_chance: float
    current_rarity: Rarity
    possible_rarity: Rarity
    possible_inherited_abilities: Tuple[str, ...]
    cost: BreedingCost
