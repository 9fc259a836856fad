"""
Unit Conversions
Rewrites US customary ingredient quantities and Fahrenheit temperatures for display
"""

import logging
import math
import re
from types import MappingProxyType
from typing import Literal, Optional


logger = logging.getLogger(__name__)

UnitSystem = Literal["us", "metric"]
TempUnit = Literal["f", "c"]

UNIT_SYSTEMS = ("us", "metric")
TEMP_UNITS = ("f", "c")


class ConversionError(ValueError):
    """Base exception for conversion errors"""
    pass


class UnsupportedUnitError(ConversionError):
    """Raised when a unit system or temperature unit selector is not recognized"""
    pass


# Grams per US cup. Checked in this order, first substring match wins.
INGREDIENT_DENSITY = MappingProxyType({
    "flour": 120,
    "sugar": 200,
    "brown sugar": 220,
    "butter": 227,
    "water": 236,
    "milk": 245,
    "oil": 224,
})

CONVERSIONS = MappingProxyType({
    "oz": 28.35,     # g
    "lb": 453.592,   # g
    "cup": 236.588,  # ml
    "tbsp": 14.787,  # ml
    "tsp": 4.929,    # ml
})

WEIGHT_UNITS = frozenset({"oz", "lb"})

QUANTITY_PATTERN = re.compile(r"(\d*\.?\d+)\s*(oz|lb|cup|tbsp|tsp)s?\b", re.IGNORECASE)
FAHRENHEIT_PATTERN = re.compile(r"(\d+)\s*°?F\b", re.IGNORECASE)
DEGREES_F_PATTERN = re.compile(r"(\d+) degrees F", re.IGNORECASE)


def _round(value: float) -> int:
    """Round to the nearest integer, halves up"""
    return math.floor(value + 0.5)


def _normalize(selector: str, allowed: tuple, kind: str) -> str:
    normalized = str(selector).strip().lower()
    if normalized not in allowed:
        raise UnsupportedUnitError(
            f"Unsupported {kind} '{selector}'. Expected one of: {', '.join(allowed)}"
        )
    return normalized


def find_density(text: str) -> Optional[tuple[str, int]]:
    """Return the first density table entry whose key appears in text"""
    text_lower = text.lower()
    for name, grams_per_cup in INGREDIENT_DENSITY.items():
        if name in text_lower:
            return name, grams_per_cup
    return None


def fahrenheit_to_celsius(fahrenheit: int) -> int:
    """
    Convert an oven temperature to Celsius, rounded to the nearest multiple of 5.

    Rounding happens on the exact Celsius value divided by 5, so the result
    always lands on a dial increment (350 -> 175, 400 -> 205).
    """
    return _round((fahrenheit - 32) * 5 / 9 / 5) * 5


def convert_ingredient(ingredient: str, system: UnitSystem) -> str:
    """
    Convert the first quantity and unit in an ingredient phrase.

    US input is returned as-is. For metric, weights (oz, lb) become grams,
    cups of known baking staples become grams through INGREDIENT_DENSITY and
    any other volume becomes milliliters. Phrases without a recognizable
    quantity are returned unchanged.
    """
    if _normalize(system, UNIT_SYSTEMS, "unit system") == "us":
        return ingredient

    match = QUANTITY_PATTERN.search(ingredient)
    if not match:
        return ingredient

    value = float(match.group(1))
    unit = match.group(2).lower()
    rest = (ingredient[:match.start()] + ingredient[match.end():]).strip()

    factor, suffix = CONVERSIONS[unit], "ml"
    if unit in WEIGHT_UNITS:
        suffix = "g"
    elif unit == "cup":
        density = find_density(rest)
        if density:
            name, factor = density
            suffix = "g"
            logger.debug("Density conversion for '%s' using '%s'", ingredient, name)

    amount = value * factor
    if not math.isfinite(amount):
        logger.debug("Quantity out of range in '%s', left unconverted", ingredient)
        return ingredient
    return f"{_round(amount)}{suffix} {rest}"


def _replace_fahrenheit(match: re.Match) -> str:
    try:
        celsius = fahrenheit_to_celsius(int(match.group(1)))
    except (ValueError, OverflowError):
        # Too many digits to parse or to divide as a float
        return match.group(0)
    return f"{celsius}°C"


def convert_instruction(instruction: str, temp_unit: TempUnit) -> str:
    """Rewrite every Fahrenheit temperature in an instruction step as Celsius"""
    if _normalize(temp_unit, TEMP_UNITS, "temperature unit") == "f":
        return instruction

    # Two passes, the second over the output of the first
    converted = FAHRENHEIT_PATTERN.sub(_replace_fahrenheit, instruction)
    return DEGREES_F_PATTERN.sub(_replace_fahrenheit, converted)
