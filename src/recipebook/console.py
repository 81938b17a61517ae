"""Interactive console for building and scaling recipes."""

import math
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .errors import RecipeNotFound
from .logger import clear_session_id, get_logger, set_session_id
from .manager import RecipeManager
from .models import Recipe

logger = get_logger("console")

MENU = """
[bold]Commands:[/bold]
1 - Add recipe
2 - Add ingredient
3 - Add step
4 - Display recipe
5 - Scale recipe
6 - Reset quantities
7 - Clear recipe
8 - List recipe names
0 - Exit"""


def parse_non_negative(text: str) -> Optional[float]:
    """Parse a quantity or calorie value. Returns None if invalid or negative."""
    value = parse_number(text)
    if value is None or value < 0:
        return None
    return value


def parse_number(text: str) -> Optional[float]:
    """Parse a finite real number, or None if the text is not one."""
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def format_number(value: float) -> str:
    return f"{value:.15g}"


class RecipeConsole:
    """Menu-driven shell around a RecipeManager."""

    def __init__(self, manager: RecipeManager, console: Optional[Console] = None):
        """Initialize the console.

        Args:
            manager: The manager that owns the recipes for this session
            console: Rich console to write to (defaults to stdout)
        """
        self.manager = manager
        self.console = console or Console()

    def ask(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console)

    def warn_calories(self, recipe: Recipe) -> None:
        """Threshold listener: tell the user the recipe is over the limit."""
        self.console.print(
            f"[yellow]Warning: '{escape(recipe.name)}' exceeds "
            f"{format_number(self.manager.calorie_threshold)} calories "
            f"({format_number(recipe.total_calories)}).[/yellow]"
        )

    def run(self) -> None:
        """Run the command loop until the user exits or input ends."""
        session = set_session_id()
        self.manager.add_threshold_listener(self.warn_calories)
        logger.info(f"Console session {session} started")
        try:
            while True:
                self.console.print(MENU)
                command = self.ask("Enter command").strip()
                if command == "0":
                    break
                self.handle(command)
        except (EOFError, KeyboardInterrupt):
            self.console.print("\nExiting...")
        finally:
            self.manager.remove_threshold_listener(self.warn_calories)
            logger.info(f"Console session {session} ended")
            clear_session_id()

    def handle(self, command: str) -> None:
        """Dispatch a single menu command."""
        handlers = {
            "1": self.add_recipe,
            "2": self.add_ingredient,
            "3": self.add_step,
            "4": self.display,
            "5": self.scale,
            "6": self.reset_quantities,
            "7": self.clear,
            "8": self.list_names,
        }
        handler = handlers.get(command)
        if handler is None:
            self.console.print("[red]Invalid command.[/red]")
            return
        handler()

    def add_recipe(self) -> None:
        name = self.ask("Enter recipe name")
        self.manager.create_recipe(name)
        self.console.print(f"[green]✓[/green] Added recipe: {escape(name)}")

    def add_ingredient(self) -> None:
        recipe_name = self.ask("Enter recipe name")
        if self.manager.find_recipe(recipe_name) is None:
            self._not_found()
            return

        name = self.ask("Enter ingredient name")
        quantity = parse_non_negative(self.ask("Enter quantity"))
        if quantity is None:
            self.console.print("[red]Invalid quantity. Please try again.[/red]")
            return

        measurement = self.ask("Enter measurement")
        calories = parse_non_negative(self.ask("Enter calories"))
        if calories is None:
            self.console.print("[red]Invalid calories. Please try again.[/red]")
            return

        food_group = self.ask("Enter food group")

        self.manager.add_ingredient(recipe_name, name, quantity, measurement, calories, food_group)
        self.manager.save_original_quantities()
        self.console.print(f"[green]✓[/green] Added ingredient: {escape(name)}")

    def add_step(self) -> None:
        recipe_name = self.ask("Enter recipe name")
        step = self.ask("Enter step description")
        try:
            self.manager.add_step(recipe_name, step)
        except RecipeNotFound:
            self._not_found()

    def display(self) -> None:
        """Print every recipe with its calorie total, ingredients and steps."""
        recipes = self.manager.recipes
        if not recipes:
            self.console.print("[yellow]No recipes found.[/yellow]")
            return

        self.console.print("[bold]Recipe List:[/bold]")
        self.console.print("------------")
        for recipe in recipes:
            self.console.print(f"[bold]{escape(recipe.name)}[/bold]")
            self.console.print(f"Total Calories: {format_number(recipe.total_calories)}")
            self.console.print("Ingredients:")
            for ingredient in recipe.ingredients:
                line = (
                    f"- {ingredient.name}: {format_number(ingredient.quantity)} {ingredient.measurement}, "
                    f"{format_number(ingredient.calories)} Calories, {ingredient.food_group}"
                )
                self.console.print(escape(line))
            self.console.print("Steps:")
            for step in recipe.steps:
                self.console.print(escape(f"- {step}"))
            self.console.print()

    def scale(self) -> None:
        factor = parse_number(self.ask("Enter scaling factor (0.5, 2, or 3)"))
        if factor is None:
            self.console.print("[red]Invalid scaling factor. Please try again.[/red]")
            return
        self.manager.scale(factor)
        self.console.print(f"[green]✓[/green] Scaled recipes by {format_number(factor)}")

    def reset_quantities(self) -> None:
        self.manager.reset_quantities()
        self.console.print("[green]✓[/green] Quantities reset")

    def clear(self) -> None:
        self.manager.clear()
        self.console.print("[green]✓[/green] Recipes cleared")

    def list_names(self) -> None:
        names = self.manager.list_recipe_names()
        if not names:
            self.console.print("[yellow]No recipes found.[/yellow]")
            return

        self.console.print("[bold]Recipes:[/bold]")
        for name in names:
            self.console.print(f"  • {escape(name)}")

    def _not_found(self) -> None:
        self.console.print("[red]Recipe name not found. Please try another one.[/red]")
