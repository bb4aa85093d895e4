"""Recipe detail helpers."""

from recipecatalog.recipes.scaling import (
    MAX_SERVINGS,
    InvalidServings,
    ScaledIngredient,
    ScaledRecipe,
    ServingsError,
    ServingsOutOfRange,
    scale,
    scale_recipe,
)

__all__ = [
    "MAX_SERVINGS",
    "InvalidServings",
    "ScaledIngredient",
    "ScaledRecipe",
    "ServingsError",
    "ServingsOutOfRange",
    "scale",
    "scale_recipe",
]
