"""
Recipe Data Model
Defines the Recipe dataclass as produced by the recipe generator, and its display conversion
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from core.conversions import (
    convert_ingredient,
    convert_instruction,
    UnitSystem,
    TempUnit,
)


@dataclass
class Nutrition:
    """Nutritional information, kept as the free-form strings the generator returns"""
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fat: str = ""

    def to_dict(self) -> dict:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Nutrition":
        data = data or {}
        return cls(
            calories=str(data.get("calories", "")),
            protein=str(data.get("protein", "")),
            carbs=str(data.get("carbs", "")),
            fat=str(data.get("fat", ""))
        )


@dataclass
class RecipeIngredients:
    """Ingredients split into what the user already has and what they still need"""
    provided: list[str] = field(default_factory=list)
    needed: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "provided": list(self.provided),
            "needed": list(self.needed)
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "RecipeIngredients":
        data = data or {}
        return cls(
            provided=[str(item) for item in data.get("provided") or []],
            needed=[str(item) for item in data.get("needed") or []]
        )


@dataclass
class Recipe:
    """Represents a generated recipe, with ingredients in US units and temperatures in Fahrenheit"""
    recipe_name: str
    description: str = ""
    cook_time: str = ""
    servings: str = ""
    ingredients: RecipeIngredients = field(default_factory=RecipeIngredients)
    instructions: list[str] = field(default_factory=list)
    tips: list[str] = field(default_factory=list)
    nutrition: Nutrition = field(default_factory=Nutrition)

    def to_dict(self) -> dict:
        return {
            "recipeName": self.recipe_name,
            "description": self.description,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "ingredients": self.ingredients.to_dict(),
            "instructions": list(self.instructions),
            "tips": list(self.tips),
            "nutrition": self.nutrition.to_dict()
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Recipe":
        return cls(
            recipe_name=data.get("recipeName") or "",
            description=data.get("description") or "",
            cook_time=str(data.get("cookTime", "")),
            servings=str(data.get("servings", "")),
            ingredients=RecipeIngredients.from_dict(data.get("ingredients")),
            instructions=[str(step) for step in data.get("instructions") or []],
            tips=[str(tip) for tip in data.get("tips") or []],
            nutrition=Nutrition.from_dict(data.get("nutrition"))
        )

    def converted(self, unit_system: UnitSystem, temp_unit: TempUnit) -> "Recipe":
        """
        Return a copy of the recipe for display in the chosen units.

        Ingredients go through convert_ingredient and instruction steps through
        convert_instruction. Tips and nutrition are copied untouched. Always
        call this on the original recipe, never on an already converted one.
        """
        ingredients = RecipeIngredients(
            provided=[convert_ingredient(ing, unit_system) for ing in self.ingredients.provided],
            needed=[convert_ingredient(ing, unit_system) for ing in self.ingredients.needed]
        )
        return replace(
            self,
            ingredients=ingredients,
            instructions=[convert_instruction(step, temp_unit) for step in self.instructions],
            tips=list(self.tips),
            nutrition=replace(self.nutrition)
        )

    def get_ingredients_text(self) -> str:
        """Get formatted ingredients list for display"""
        return "\n".join(self.ingredients.provided + self.ingredients.needed)

    def get_instructions_text(self) -> str:
        """Get formatted instructions for display"""
        return "\n".join(
            f"{i+1}. {step}"
            for i, step in enumerate(self.instructions)
        )


@dataclass
class SavedRecipe(Recipe):
    """A recipe the user chose to keep, with its generated image"""
    id: str = ""
    image_url: str = ""

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["id"] = self.id
        data["imageUrl"] = self.image_url
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SavedRecipe":
        recipe = Recipe.from_dict(data)
        return cls(
            **vars(recipe),
            id=str(data.get("id", "")),
            image_url=data.get("imageUrl", "")
        )
