"""
Recipe Units Core Module
Contains the unit and temperature conversions and the recipe model they are applied to
"""

from core.conversions import (
    convert_ingredient,
    convert_instruction,
    fahrenheit_to_celsius,
    ConversionError,
    UnsupportedUnitError,
    INGREDIENT_DENSITY,
    CONVERSIONS,
)
from core.models import Recipe, RecipeIngredients, Nutrition, SavedRecipe

__all__ = [
    "convert_ingredient",
    "convert_instruction",
    "fahrenheit_to_celsius",
    "ConversionError",
    "UnsupportedUnitError",
    "INGREDIENT_DENSITY",
    "CONVERSIONS",
    "Recipe",
    "RecipeIngredients",
    "Nutrition",
    "SavedRecipe",
]
