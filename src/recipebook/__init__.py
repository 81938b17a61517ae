"""Recipebook - an in-memory recipe catalog with scaling and calorie totals."""

__version__ = "0.1.0"

from .errors import RecipeBookError, RecipeNotFound
from .manager import CALORIE_THRESHOLD, RecipeManager
from .models import Ingredient, Recipe

__all__ = [
    # Data model
    "Ingredient",
    "Recipe",

    # Manager
    "RecipeManager",
    "CALORIE_THRESHOLD",

    # Errors
    "RecipeBookError",
    "RecipeNotFound",
]
