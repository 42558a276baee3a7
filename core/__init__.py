"""Core models and configuration for the breeding engine"""
from .models import (
    Rarity, StatBlock, Creature, OffspringDraft, MaterialRequirement, MissingMaterial, RecipeProgress,
    GuaranteedBonuses, UnlockRequirements, BreedingRecipe, BreedingMaterial,
    CostBreakdown, BreedingCost, BreedingResult, ValidationResult, CostValidation,
    StatRange, OffspringPreview, STAT_KEYS,
)
from .config import BreedingConfig, BREEDING_CONFIG, RARITY_PROGRESSION, MAX_GENERATION

__all__ = [
    'Rarity', 'StatBlock', 'Creature', 'OffspringDraft', 'MaterialRequirement',
    'MissingMaterial', 'RecipeProgress', 'GuaranteedBonuses', 'UnlockRequirements', 'BreedingRecipe',
    'BreedingMaterial', 'CostBreakdown', 'BreedingCost', 'BreedingResult',
    'ValidationResult', 'CostValidation', 'StatRange', 'OffspringPreview', 'STAT_KEYS',
    'BreedingConfig', 'BREEDING_CONFIG', 'RARITY_PROGRESSION', 'MAX_GENERATION',
]
