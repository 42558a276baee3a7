"""
Recipe book

Recipes are looked up in a catalog keyed by recipe id, as returned by
data.loader.load_recipes. Nothing here reads files.
"""
import logging
from typing import Iterable, List, Mapping, Optional

from core.game_logic import material_shortfalls, round_half_up
from core.models import BreedingRecipe, Creature, MissingMaterial, RecipeProgress

logger = logging.getLogger(__name__)


def _species_match(expected: Optional[str], species: str) -> bool:
    return expected is None or expected == species


def species_match_recipe(recipe: BreedingRecipe, species1: str, species2: str) -> bool:
    """True if the two species fit the recipe in either order"""
    return (
        (_species_match(recipe.parent_species1, species1) and _species_match(recipe.parent_species2, species2))
        or (_species_match(recipe.parent_species1, species2) and _species_match(recipe.parent_species2, species1))
    )


def recipe_matches_parents(recipe: BreedingRecipe, parent1: Creature, parent2: Creature) -> bool:
    """True if the recipe applies to these two parents"""
    return species_match_recipe(recipe, parent1.species, parent2.species)


def find_matching_recipe(
    species1: str,
    species2: str,
    recipes: Mapping[str, BreedingRecipe],
) -> Optional[BreedingRecipe]:
    """
    First recipe in catalog order whose parent species match.

    Parent order does not matter, and a recipe parent species of None
    matches any species.
    """
    for recipe in recipes.values():
        if species_match_recipe(recipe, species1, species2):
            logger.debug(f"Recipe {recipe.recipe_id} matches {species1} x {species2}")
            return recipe
    return None


def get_recipe(recipe_id: str, recipes: Mapping[str, BreedingRecipe]) -> Optional[BreedingRecipe]:
    recipe = recipes.get(recipe_id)
    if recipe is None:
        logger.warning(f"Unknown recipe id: {recipe_id}")
    return recipe


def is_recipe_unlocked(
    recipe: BreedingRecipe,
    discovered_ids: Iterable[str] = (),
    player_level: int = 1,
    story_flags: Iterable[str] = (),
    owned_species: Iterable[str] = (),
) -> bool:
    """
    Check if the player may use a recipe.

    The recipe must have been discovered, and the player must meet the
    minimum level and hold every story flag and required creature species.
    """
    if recipe.recipe_id not in set(discovered_ids):
        return False
    if not is_recipe_unlockable(recipe, player_level, story_flags):
        return False

    owned = set(owned_species)
    return all(species in owned for species in recipe.unlock.required_creatures)


def is_recipe_unlockable(recipe: BreedingRecipe, player_level: int = 1, story_flags: Iterable[str] = ()) -> bool:
    """True if level and story flags allow the recipe, ignoring creatures owned"""
    unlock = recipe.unlock
    if player_level < unlock.min_player_level:
        return False

    flags = set(story_flags)
    return all(flag in flags for flag in unlock.story_flags)


def _owns_parent(expected: Optional[str], owned: set) -> bool:
    if expected is None:
        return bool(owned)
    return expected in owned


def discover_recipes(
    owned_species: Iterable[str],
    discovered_ids: Iterable[str],
    player_level: int,
    story_flags: Iterable[str],
    recipes: Mapping[str, BreedingRecipe],
) -> List[BreedingRecipe]:
    """
    Recipes the player uncovers with their current collection.

    A recipe is discovered once the player meets its level, story flag and
    required creature rules and owns both parent species. Recipes already
    discovered are skipped, so only new ones are returned, in catalog order.

    Args:
        owned_species: Species of every creature the player owns
        discovered_ids: Recipe ids already discovered
        player_level: Current player level
        story_flags: Story flags the player holds
        recipes: Recipe catalog keyed by id

    Returns:
        Newly discovered recipes
    """
    owned = set(owned_species)
    discovered = set(discovered_ids)
    story_flags = tuple(story_flags)
    found = []

    for recipe_id, recipe in recipes.items():
        if recipe_id in discovered:
            continue
        if not is_recipe_unlockable(recipe, player_level, story_flags):
            continue
        if not all(species in owned for species in recipe.unlock.required_creatures):
            continue
        if _owns_parent(recipe.parent_species1, owned) and _owns_parent(recipe.parent_species2, owned):
            found.append(recipe)

    if found:
        logger.info(f"Discovered recipes: {[recipe.recipe_id for recipe in found]}")
    return found


def discover_recipes_after_capture(
    new_creature: Creature,
    owned_species: Iterable[str],
    discovered_ids: Iterable[str],
    player_level: int,
    story_flags: Iterable[str],
    recipes: Mapping[str, BreedingRecipe],
) -> List[BreedingRecipe]:
    """Run discovery with a newly captured or bred creature added to the collection"""
    owned = set(owned_species)
    owned.add(new_creature.species)
    return discover_recipes(owned, discovered_ids, player_level, story_flags, recipes)


def get_recipe_hint(recipe_id: str, recipes: Mapping[str, BreedingRecipe]) -> Optional[str]:
    recipe = recipes.get(recipe_id)
    if recipe is None or not recipe.hint:
        return None
    return recipe.hint


def calculate_recipe_progress(
    discovered_ids: Iterable[str],
    player_level: int,
    story_flags: Iterable[str],
    recipes: Mapping[str, BreedingRecipe],
) -> RecipeProgress:
    """
    Discovery progress over the catalog.

    ``available`` counts recipes the player's level and story flags allow;
    ``percentage`` is discovered over total, rounded to a whole number.
    """
    story_flags = tuple(story_flags)
    discovered = len(set(discovered_ids))
    total = len(recipes)
    available = sum(
        1 for recipe in recipes.values() if is_recipe_unlockable(recipe, player_level, story_flags)
    )
    percentage = round_half_up(discovered / total * 100) if total else 0
    return RecipeProgress(discovered=discovered, available=available, total=total, percentage=percentage)


def has_materials(recipe: BreedingRecipe, inventory: Optional[Mapping[str, int]]) -> bool:
    """True if the inventory covers every material the recipe consumes"""
    return not material_shortfalls(recipe.materials, inventory)


def get_missing_materials(
    recipe: BreedingRecipe,
    inventory: Optional[Mapping[str, int]],
) -> List[MissingMaterial]:
    """
    Materials the player is short of, with what they have and still need.

    ``need`` is the remaining amount, not the recipe quantity.
    """
    inventory = inventory or {}
    return [
        MissingMaterial(
            item_id=shortfall.item_id,
            name=shortfall.display_name,
            have=inventory.get(shortfall.item_id, 0),
            need=shortfall.quantity,
        )
        for shortfall in material_shortfalls(recipe.materials, inventory)
    ]
