"""Serving-size scaling for the recipe detail view."""

import math
from dataclasses import dataclass, field

from recipecatalog.logging_config import get_logger
from recipecatalog.normalize.quantities import round_half_up
from recipecatalog.schemas import Ingredient, Recipe

logger = get_logger(__name__)

# Largest serving count a recipe may be scaled to
MAX_SERVINGS = 100


class ServingsError(ValueError):
    """Base exception for rejected serving counts."""

    code = "servings_error"

    def __init__(self, message: str, servings: float):
        super().__init__(message)
        self.servings = servings


class InvalidServings(ServingsError):
    """Raised when a serving count is zero, negative or not a finite number."""

    code = "invalid_servings"


class ServingsOutOfRange(ServingsError):
    """Raised when the target serving count exceeds MAX_SERVINGS."""

    code = "servings_out_of_range"


@dataclass(frozen=True)
class ScaledIngredient:
    """An ingredient's display quantity for a chosen serving count."""

    ingredient: Ingredient
    display_quantity: float
    scaled: bool = False
    needs_manual_adjustment: bool = False


@dataclass(frozen=True)
class ScaledRecipe:
    """All ingredients of a recipe scaled to a target serving count."""

    recipe_id: str
    original_servings: float
    target_servings: float
    ingredients: list[ScaledIngredient] = field(default_factory=list)

    @property
    def scaling_factor(self) -> float:
        return self.target_servings / self.original_servings

    @property
    def is_scaled(self) -> bool:
        return self.target_servings != self.original_servings

    @property
    def manual_adjustments(self) -> list[ScaledIngredient]:
        """Ingredients the cook has to adjust by hand."""
        return [item for item in self.ingredients if item.needs_manual_adjustment]


def validate_servings(original_servings: float, target_servings: float) -> None:
    """
    Check a scaling request.

    Raises:
        InvalidServings: If either serving count is not a positive number.
        ServingsOutOfRange: If the target is above MAX_SERVINGS.
    """
    if not math.isfinite(original_servings) or original_servings <= 0:
        raise InvalidServings(
            f"Recipe servings must be greater than 0, got {original_servings}",
            original_servings,
        )
    if not math.isfinite(target_servings):
        raise InvalidServings(
            f"Servings must be a finite number, got {target_servings}",
            target_servings,
        )
    if target_servings <= 0:
        raise InvalidServings(
            f"Servings must be greater than 0, got {target_servings}",
            target_servings,
        )
    if target_servings > MAX_SERVINGS:
        raise ServingsOutOfRange(
            f"Servings cannot exceed {MAX_SERVINGS}, got {target_servings}",
            target_servings,
        )


def _scale_validated(
    original_servings: float,
    target_servings: float,
    ingredient: Ingredient,
) -> ScaledIngredient:
    is_scaled = target_servings != original_servings

    if not ingredient.scalable:
        return ScaledIngredient(
            ingredient=ingredient,
            display_quantity=ingredient.quantity,
            scaled=False,
            needs_manual_adjustment=is_scaled,
        )

    if not is_scaled:
        return ScaledIngredient(ingredient=ingredient, display_quantity=ingredient.quantity)

    factor = target_servings / original_servings
    return ScaledIngredient(
        ingredient=ingredient,
        display_quantity=round_half_up(ingredient.quantity * factor),
        scaled=True,
    )


def scale(
    original_servings: float,
    target_servings: float,
    ingredient: Ingredient,
) -> ScaledIngredient:
    """
    Scale one ingredient from the recipe's servings to a target.

    Scalable quantities are multiplied by target/original and rounded
    half-up to two decimals. Non-scalable quantities are returned unchanged
    and flagged for manual adjustment whenever the recipe is being scaled.

    Args:
        original_servings: Servings the recipe was written for (> 0).
        target_servings: Desired servings, in (0, MAX_SERVINGS].
        ingredient: The ingredient to scale.

    Returns:
        ScaledIngredient with the display quantity and flags.

    Raises:
        InvalidServings: If a serving count is not a positive number.
        ServingsOutOfRange: If target_servings exceeds MAX_SERVINGS.
    """
    validate_servings(original_servings, target_servings)
    return _scale_validated(original_servings, target_servings, ingredient)


def scale_recipe(recipe: Recipe, target_servings: float) -> ScaledRecipe:
    """Scale every ingredient of a recipe, keeping ingredient order."""
    validate_servings(recipe.servings, target_servings)

    ingredients = [
        _scale_validated(recipe.servings, target_servings, ingredient)
        for ingredient in recipe.ingredients
    ]

    logger.debug(
        f"Scaled recipe {recipe.id} from {recipe.servings} to {target_servings} servings "
        f"({len(ingredients)} ingredients)"
    )

    return ScaledRecipe(
        recipe_id=recipe.id,
        original_servings=recipe.servings,
        target_servings=target_servings,
        ingredients=ingredients,
    )
