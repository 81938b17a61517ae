"""Pydantic models for recipes and their ingredients."""

from pydantic import BaseModel, Field, computed_field


class Ingredient(BaseModel):
    """A named quantity of a food item.

    ``calories`` is per unit of ``quantity``. ``original_quantity`` is the
    baseline used for scaling and only moves when the manager saves it.
    """

    name: str = Field(..., description="Ingredient name")
    quantity: float = Field(..., description="Current amount")
    measurement: str = Field("", description="Unit of measurement")
    calories: float = Field(0.0, description="Calories per unit of quantity")
    food_group: str = Field("", description="Food group")
    original_quantity: float = Field(0.0, description="Scaling baseline")

    @property
    def total_calories(self) -> float:
        return self.calories * self.quantity


class Recipe(BaseModel):
    """Named collection of ingredients and preparation steps."""

    name: str = Field(..., description="Recipe name")
    ingredients: list[Ingredient] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def total_calories(self) -> float:
        """Sum of calories x quantity over the ingredients, never cached."""
        return sum((ingredient.total_calories for ingredient in self.ingredients), 0.0)
