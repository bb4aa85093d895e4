"""API routes for shopping list generation and export."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from recipecatalog.config import get_settings
from recipecatalog.logging_config import get_logger
from recipecatalog.schemas import Recipe
from recipecatalog.shopping.categories import item_identity
from recipecatalog.shopping.shopping_list import build_shopping_list

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ShoppingListRequest(BaseModel):
    """Recipes selected for the shopping list."""

    recipes: list[Recipe] = Field(default_factory=list)


class ShoppingListItemResponse(BaseModel):
    """Single line of the shopping list."""

    name: str
    quantity: float
    display_quantity: str
    unit: str
    scalable: bool
    needs_adjustment: bool
    recipe_ids: list[str]
    identity: list[str] = Field(description="Name, unit and category, for tracking check marks")


class ShoppingListCategoryResponse(BaseModel):
    """Items of one category."""

    category: str
    items: list[ShoppingListItemResponse]


class ShoppingListResponse(BaseModel):
    """Categorized shopping list; empty categories are omitted."""

    recipe_count: int
    item_count: int
    categories: list[ShoppingListCategoryResponse]


# =============================================================================
# Endpoints
# =============================================================================


@router.post("", response_model=ShoppingListResponse)
async def create_shopping_list(request: ShoppingListRequest) -> ShoppingListResponse:
    """Consolidate and categorize the ingredients of the given recipes."""
    shopping_list = build_shopping_list(request.recipes)

    return ShoppingListResponse(
        recipe_count=shopping_list.recipe_count,
        item_count=shopping_list.item_count,
        categories=[
            ShoppingListCategoryResponse(
                category=category.value,
                items=[
                    ShoppingListItemResponse(
                        name=item.name,
                        quantity=item.quantity,
                        display_quantity=item.display_quantity(),
                        unit=item.unit,
                        scalable=item.scalable,
                        needs_adjustment=item.needs_adjustment,
                        recipe_ids=item.recipe_ids,
                        identity=list(item_identity(item, category)),
                    )
                    for item in items
                ],
            )
            for category, items in shopping_list.non_empty_categories
        ],
    )


@router.post("/export", response_class=PlainTextResponse)
async def export_shopping_list(request: ShoppingListRequest) -> PlainTextResponse:
    """Download the shopping list as plain text."""
    shopping_list = build_shopping_list(request.recipes)
    filename = get_settings().export_filename

    logger.info(f"Exporting shopping list with {shopping_list.item_count} items")

    return PlainTextResponse(
        content=shopping_list.to_text(),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
