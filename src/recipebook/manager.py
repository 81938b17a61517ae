"""In-memory recipe catalog with scaling and calorie notifications."""

from typing import Callable, List, Optional

from .errors import RecipeNotFound
from .logger import get_logger
from .models import Ingredient, Recipe
from .profile import DEFAULT_CALORIE_THRESHOLD

logger = get_logger("manager")

CALORIE_THRESHOLD = DEFAULT_CALORIE_THRESHOLD

ThresholdListener = Callable[[Recipe], None]


class RecipeManager:
    """Owns the recipe collection and every operation on it.

    Recipes keep creation order. Names are not unique; lookups return the
    first match. Listeners registered with ``add_threshold_listener`` are
    called synchronously, in registration order, whenever an ingredient
    addition leaves a recipe above the calorie threshold.
    """

    def __init__(self, calorie_threshold: float = CALORIE_THRESHOLD):
        self.calorie_threshold = calorie_threshold
        self._recipes: List[Recipe] = []
        self._listeners: List[ThresholdListener] = []

    def __len__(self) -> int:
        return len(self._recipes)

    @property
    def recipes(self) -> List[Recipe]:
        """Recipes in creation order."""
        return list(self._recipes)

    def add_threshold_listener(self, listener: ThresholdListener) -> None:
        """Register a callback for recipes going over the calorie threshold."""
        self._listeners.append(listener)

    def remove_threshold_listener(self, listener: ThresholdListener) -> None:
        """Unregister a callback. Unknown callbacks are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def create_recipe(self, name: str) -> Recipe:
        """Append a new empty recipe. Duplicate names are allowed."""
        recipe = Recipe(name=name)
        self._recipes.append(recipe)
        logger.info(f"Created recipe: {name}")
        return recipe

    def find_recipe(self, name: str) -> Optional[Recipe]:
        """Return the first recipe with exactly this name, or None."""
        for recipe in self._recipes:
            if recipe.name == name:
                return recipe
        return None

    def _require_recipe(self, name: str) -> Recipe:
        recipe = self.find_recipe(name)
        if recipe is None:
            logger.warning(f"Recipe not found: {name}")
            raise RecipeNotFound(name)
        return recipe

    def add_ingredient(
        self,
        recipe_name: str,
        name: str,
        quantity: float,
        measurement: str,
        calories: float,
        food_group: str,
    ) -> Ingredient:
        """Append an ingredient to a recipe and check the calorie threshold.

        Quantity and calories are trusted as already validated. The new
        ingredient's baseline stays at zero until
        ``save_original_quantities`` runs.

        Raises:
            RecipeNotFound: If no recipe has that name.
        """
        recipe = self._require_recipe(recipe_name)

        ingredient = Ingredient(
            name=name,
            quantity=quantity,
            measurement=measurement,
            calories=calories,
            food_group=food_group,
        )
        recipe.ingredients.append(ingredient)
        logger.debug(f"Added ingredient {name} to {recipe_name}")

        total = recipe.total_calories
        if total > self.calorie_threshold:
            logger.warning(f"Recipe {recipe_name} exceeds {self.calorie_threshold:g} calories ({total:g})")
            for listener in list(self._listeners):
                listener(recipe)

        return ingredient

    def add_step(self, recipe_name: str, step: str) -> None:
        """Append a preparation step to a recipe.

        Raises:
            RecipeNotFound: If no recipe has that name.
        """
        recipe = self._require_recipe(recipe_name)
        recipe.steps.append(step)
        logger.debug(f"Added step to {recipe_name}")

    def _ingredients(self):
        for recipe in self._recipes:
            yield from recipe.ingredients

    def save_original_quantities(self) -> None:
        """Commit every current quantity as its scaling baseline."""
        for ingredient in self._ingredients():
            ingredient.original_quantity = ingredient.quantity

    def scale(self, factor: float) -> None:
        """Set every quantity to its baseline times ``factor``.

        Scaling is relative to the saved baseline, so repeated calls do not
        compound. Any factor is applied as given, including zero and
        negative values.
        """
        if factor <= 0:
            logger.warning(f"Scaling by non-positive factor {factor:g}")
        for ingredient in self._ingredients():
            ingredient.quantity = ingredient.original_quantity * factor
        logger.info(f"Scaled {len(self._recipes)} recipes by {factor:g}")

    def reset_quantities(self) -> None:
        """Restore every quantity to its baseline."""
        for ingredient in self._ingredients():
            ingredient.quantity = ingredient.original_quantity
        logger.info("Reset quantities")

    def clear(self) -> None:
        """Drop every recipe."""
        count = len(self._recipes)
        self._recipes.clear()
        logger.info(f"Cleared {count} recipes")

    def list_recipe_names(self) -> List[str]:
        """Recipe names in ascending order, duplicates included."""
        return sorted(recipe.name for recipe in self._recipes)
