"""Data loader for the breeding catalog JSON files"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from core.models import BreedingRecipe, BreedingMaterial

logger = logging.getLogger(__name__)

# Get data directory
DATA_DIR = Path(__file__).parent

RECIPES_FILE = "breeding_recipes.json"
MATERIALS_FILE = "breeding_materials.json"


def load_json_file(filename: str, data_dir: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load a JSON file from the data directory (None if missing or unreadable)"""
    filepath = Path(data_dir or DATA_DIR) / filename
    if not filepath.exists():
        logger.warning(f"Data file {filename} not found in {filepath.parent}")
        return None

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading {filename} from {filepath}: {e}")
        return None


def load_recipes(data_dir: Optional[Path] = None) -> Dict[str, BreedingRecipe]:
    """
    Load the recipe catalog, keyed by recipe id in file order.

    Entries that fail to parse are skipped and logged.
    """
    data = load_json_file(RECIPES_FILE, data_dir) or {}
    recipes = {}
    for entry in data.get("recipes", []):
        try:
            recipe = BreedingRecipe.from_dict(entry)
        except (KeyError, ValueError, TypeError) as e:
            logger.error(f"Skipping malformed recipe {entry.get('id', '?') if isinstance(entry, dict) else entry!r}: {e}")
            continue
        recipes[recipe.recipe_id] = recipe
    return recipes


def load_materials(data_dir: Optional[Path] = None) -> Dict[str, BreedingMaterial]:
    """
    Load the breeding material catalog, keyed by material id.

    Entries that fail to parse are skipped and logged.
    """
    data = load_json_file(MATERIALS_FILE, data_dir) or {}
    materials = {}
    for entry in data.get("materials", []):
        try:
            material = BreedingMaterial.from_dict(entry)
        except (KeyError, ValueError, TypeError) as e:
            logger.error(f"Skipping malformed material {entry.get('id', '?') if isinstance(entry, dict) else entry!r}: {e}")
            continue
        materials[material.material_id] = material
    return materials


def load_data(data_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load both breeding catalogs.

    Returns a dictionary with keys:
    - recipes: recipe id -> BreedingRecipe
    - materials: material id -> BreedingMaterial

    Falls back to empty dicts if files are missing.
    """
    return {
        "recipes": load_recipes(data_dir),
        "materials": load_materials(data_dir),
    }
