"""Tests for the catalog loader"""
import json

from core.models import Rarity
from data.loader import load_json_file, load_recipes, load_materials, load_data


class TestShippedCatalogs:
    """The JSON files in data/ parse cleanly"""

    def test_recipes_loaded(self, recipes):
        assert len(recipes) == 12
        slime_fusion = recipes["slime_fusion"]
        assert slime_fusion.offspring_species == "king_slime"
        assert slime_fusion.bonuses.stat_multiplier == 1.15
        assert slime_fusion.bonuses.min_rarity is None
        assert slime_fusion.materials[0].item_id == "slime_gel"

    def test_recipe_bonuses_parsed(self, recipes):
        celestial = recipes["celestial_dragon"]

        assert celestial.bonuses.min_rarity == Rarity.MYTHICAL
        assert celestial.bonuses.generation_bonus == 2
        assert celestial.unlock.min_player_level == 50
        assert celestial.unlock.required_creatures == ("ancient_dragon", "phoenix")

    def test_catalog_order_kept(self, recipes):
        assert list(recipes)[:3] == ["slime_fusion", "goblin_warrior", "dire_wolf_breeding"]

    def test_materials_loaded(self, materials):
        gel = materials["slime_gel"]

        assert gel.name == "Slime Gel"
        assert gel.rarity == Rarity.COMMON
        assert gel.stack_limit == 99
        assert materials["celestial_essence"].rarity == Rarity.MYTHICAL

    def test_every_recipe_material_exists(self, recipes, materials):
        for recipe in recipes.values():
            for requirement in recipe.materials:
                assert requirement.item_id in materials, f"{recipe.recipe_id} needs unknown {requirement.item_id}"

    def test_load_data(self):
        data = load_data()
        assert set(data) == {"recipes", "materials"}


class TestLoaderFailures:
    """Missing or broken files degrade to empty catalogs"""

    def test_missing_file(self, tmp_path, caplog):
        assert load_json_file("breeding_recipes.json", tmp_path) is None
        assert load_recipes(tmp_path) == {}
        assert load_materials(tmp_path) == {}
        assert "not found" in caplog.text

    def test_invalid_json(self, tmp_path):
        (tmp_path / "breeding_recipes.json").write_text("{not json", encoding="utf-8")

        assert load_recipes(tmp_path) == {}

    def test_malformed_entry_skipped(self, tmp_path, caplog):
        catalog = {
            "recipes": [
                {"id": "ok", "name": "Fine", "offspring_species": "thing"},
                {"id": "broken", "offspring_species": "thing"},
                {"id": "bad_rarity", "name": "Bad", "offspring_species": "thing",
                 "guaranteed_bonuses": {"min_rarity": "shiny"}},
            ]
        }
        (tmp_path / "breeding_recipes.json").write_text(json.dumps(catalog), encoding="utf-8")

        recipes = load_recipes(tmp_path)

        assert list(recipes) == ["ok"]
        assert "broken" in caplog.text
        assert "bad_rarity" in caplog.text

    def test_camel_case_entries(self, tmp_path):
        catalog = {
            "recipes": [{
                "id": "camel",
                "name": "Camel",
                "parentSpecies1": "slime",
                "offspringSpecies": "camel_slime",
                "materials": [{"itemId": "slime_gel", "quantity": 2, "name": "Slime Gel"}],
                "guaranteedBonuses": {"statMultiplier": 1.2, "minRarity": "rare"},
                "unlockRequirements": {"minPlayerLevel": 3},
            }]
        }
        (tmp_path / "breeding_recipes.json").write_text(json.dumps(catalog), encoding="utf-8")

        recipe = load_recipes(tmp_path)["camel"]

        assert recipe.parent_species1 == "slime"
        assert recipe.parent_species2 is None
        assert recipe.materials[0].item_id == "slime_gel"
        assert recipe.bonuses.min_rarity == Rarity.RARE
        assert recipe.unlock.min_player_level == 3
