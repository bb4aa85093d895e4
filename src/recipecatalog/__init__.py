"""Recipe scaling and shopping list consolidation."""

from recipecatalog.recipes.scaling import (
    InvalidServings,
    ServingsError,
    ServingsOutOfRange,
    scale,
    scale_recipe,
)
from recipecatalog.schemas import Ingredient, Recipe
from recipecatalog.shopping import (
    Category,
    ConsolidatedItem,
    ShoppingList,
    build_shopping_list,
    categorize,
    classify,
    consolidate,
    format_shopping_list,
)

__version__ = "0.1.0"

__all__ = [
    "Category",
    "ConsolidatedItem",
    "Ingredient",
    "InvalidServings",
    "Recipe",
    "ServingsError",
    "ServingsOutOfRange",
    "ShoppingList",
    "build_shopping_list",
    "categorize",
    "classify",
    "consolidate",
    "format_shopping_list",
    "scale",
    "scale_recipe",
]
