"""API routes for the recipe detail view."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from recipecatalog.logging_config import LoggingContext, get_logger
from recipecatalog.recipes.scaling import ServingsError, scale_recipe
from recipecatalog.schemas import Recipe

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ScaleRequest(BaseModel):
    """Request to rescale a recipe."""

    recipe: Recipe
    target_servings: float = Field(
        allow_inf_nan=False,
        description="Desired servings, greater than 0 and at most 100",
    )


class ScaledIngredientResponse(BaseModel):
    """Ingredient with its display quantity for the chosen servings."""

    name: str
    unit: str
    original_quantity: float
    display_quantity: float
    scalable: bool
    scaled: bool
    needs_manual_adjustment: bool


class ScaledRecipeResponse(BaseModel):
    """Recipe ingredients rescaled to a target serving count."""

    recipe_id: str
    original_servings: float
    target_servings: float
    scaling_factor: float
    is_scaled: bool
    ingredients: list[ScaledIngredientResponse]


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/scale", response_model=ScaledRecipeResponse)
async def scale_recipe_servings(request: ScaleRequest) -> ScaledRecipeResponse:
    """
    Scale a recipe's ingredients to a new serving count.

    Rejected serving counts return 400 with an error code of
    `invalid_servings` or `servings_out_of_range`.
    """
    with LoggingContext(recipe_id=request.recipe.id):
        try:
            scaled = scale_recipe(request.recipe, request.target_servings)
        except ServingsError as e:
            logger.warning(f"Rejected scaling request: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"error": e.code, "message": str(e)},
            ) from e

    return ScaledRecipeResponse(
        recipe_id=scaled.recipe_id,
        original_servings=scaled.original_servings,
        target_servings=scaled.target_servings,
        scaling_factor=scaled.scaling_factor,
        is_scaled=scaled.is_scaled,
        ingredients=[
            ScaledIngredientResponse(
                name=item.ingredient.name,
                unit=item.ingredient.unit,
                original_quantity=item.ingredient.quantity,
                display_quantity=item.display_quantity,
                scalable=item.ingredient.scalable,
                scaled=item.scaled,
                needs_manual_adjustment=item.needs_manual_adjustment,
            )
            for item in scaled.ingredients
        ],
    )
