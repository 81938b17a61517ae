"""Exceptions raised by the recipe manager."""


class RecipeBookError(Exception):
    """Base class for recipebook errors."""


class RecipeNotFound(RecipeBookError):
    """Raised when an operation targets a recipe name with no match."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Recipe '{name}' not found")
