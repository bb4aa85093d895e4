"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from recipecatalog.schemas import Ingredient, Recipe

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def pancakes():
    """Pancake recipe serving 4."""
    return Recipe(
        id="recipe-pancakes",
        title="Fluffy Pancakes",
        servings=4,
        ingredients=[
            Ingredient(name="flour", quantity=200, unit="g", scalable=True),
            Ingredient(name="milk", quantity=1.5, unit="cup", scalable=True),
            Ingredient(name="eggs", quantity=2, unit="whole", scalable=True),
            Ingredient(name="salt", quantity=1, unit="pinch", scalable=False),
            Ingredient(name="vanilla extract", quantity=1, unit="tsp", scalable=False),
        ],
    )


@pytest.fixture
def carbonara():
    """Spaghetti carbonara serving 2."""
    return Recipe(
        id="recipe-carbonara",
        title="Spaghetti Carbonara",
        servings=2,
        ingredients=[
            Ingredient(name="spaghetti", quantity=200, unit="g", scalable=True),
            Ingredient(name="pancetta", quantity=100, unit="g", scalable=True),
            Ingredient(name="Eggs", quantity=3, unit="whole", scalable=True),
            Ingredient(name="parmesan cheese", quantity=0.5, unit="cup", scalable=True),
            Ingredient(name="black pepper", quantity=1, unit="tsp", scalable=False),
            Ingredient(name="salt", quantity=1, unit="pinch", scalable=False),
        ],
    )


@pytest.fixture
def tomato_recipes():
    """Two recipes sharing a scalable tomato line."""
    return [
        Recipe(
            id="r1",
            title="Tomato Soup",
            servings=4,
            ingredients=[Ingredient(name="tomato", quantity=2, unit="cup", scalable=True)],
        ),
        Recipe(
            id="r2",
            title="Bruschetta",
            servings=2,
            ingredients=[Ingredient(name="tomato", quantity=1, unit="cup", scalable=True)],
        ),
    ]


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    from recipecatalog.main import app

    return TestClient(app)
