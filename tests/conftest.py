"""Shared fixtures for recipebook tests."""

import os
import tempfile

# Logs go to a throwaway directory; must be set before recipebook is imported.
os.environ["RECIPEBOOK_HOME"] = tempfile.mkdtemp(prefix="recipebook-tests-")
os.environ.pop("RECIPEBOOK_CALORIE_THRESHOLD", None)

import pytest

from recipebook import RecipeManager


@pytest.fixture
def manager():
    return RecipeManager()


@pytest.fixture
def pancakes(manager):
    """Manager holding one recipe with two ingredients and a saved baseline."""
    manager.create_recipe("Pancakes")
    manager.add_ingredient("Pancakes", "Flour", 2, "cups", 50, "Grains")
    manager.add_ingredient("Pancakes", "Milk", 1, "cup", 40, "Dairy")
    manager.save_original_quantities()
    return manager
