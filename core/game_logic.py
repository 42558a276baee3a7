"""Core breeding helper functions"""
import hashlib
import hmac
import math
import random
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from core.config import RARITY_PROGRESSION, BREEDING_CONFIG_VERSION
from core.models import Rarity, MaterialRequirement


def rarity_index(rarity: Rarity, progression: Tuple[str, ...] = RARITY_PROGRESSION) -> int:
    """Position of a rarity in the tier progression"""
    return progression.index(Rarity.parse(rarity).value)


def higher_rarity(rarity1: Rarity, rarity2: Rarity) -> Rarity:
    """Return the higher of two rarities"""
    rarity1, rarity2 = Rarity.parse(rarity1), Rarity.parse(rarity2)
    return rarity1 if rarity_index(rarity1) > rarity_index(rarity2) else rarity2


def next_rarity(rarity: Rarity, progression: Tuple[str, ...] = RARITY_PROGRESSION) -> Optional[Rarity]:
    """Tier above ``rarity``, or None at the top of the progression"""
    index = rarity_index(rarity, progression)
    if index >= len(progression) - 1:
        return None
    return Rarity(progression[index + 1])


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)"""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def roll(rng: random.Random, chance: float) -> bool:
    """One uniform draw; True with probability ``chance``"""
    return rng.random() < chance


def material_shortfalls(
    materials: Iterable[MaterialRequirement],
    inventory: Optional[Mapping[str, int]],
) -> List[MaterialRequirement]:
    """
    Materials the inventory cannot cover.

    Each returned requirement carries the missing amount as its quantity.
    """
    inventory = inventory or {}
    missing = []
    for material in materials:
        available = inventory.get(material.item_id, 0)
        if available < material.quantity:
            missing.append(MaterialRequirement(
                item_id=material.item_id,
                quantity=material.quantity - available,
                name=material.name,
            ))
    return missing


def format_material_error(material: MaterialRequirement) -> str:
    """Error line for a material shortfall (quantity is the shortage)"""
    return f"Need {material.quantity} more {material.display_name}"


@dataclass(frozen=True)
class SeedParts:
    """Parts used to compute a deterministic breeding seed via HMAC"""
    parent1_id: str
    parent2_id: str
    action_id: str  # breeding attempt id
    timestamp: float  # attempt start time
    config_version: str = BREEDING_CONFIG_VERSION


def compute_rng_seed(parts: SeedParts) -> int:
    """
    HMAC seed: parent1|parent2|action_id|config_version|timestamp

    Returns deterministic integer seed for random.Random.
    """
    seed_str = f"{parts.parent1_id}|{parts.parent2_id}|{parts.action_id}|{parts.config_version}|{parts.timestamp}"

    h = hmac.new(b"breeding_engine_seed", seed_str.encode('utf-8'), hashlib.sha256)
    # First 8 bytes, folded into the positive int32 range
    seed_int = int.from_bytes(h.digest()[:8], byteorder='big')
    return seed_int % (2**31 - 1)


def seeded_rng(parts: SeedParts) -> random.Random:
    """Fresh RNG for one breeding attempt; same parts replay the same outcome"""
    return random.Random(compute_rng_seed(parts))
