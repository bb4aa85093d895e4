"""API routers for the recipe catalog service."""

from recipecatalog.routers.recipes import router as recipes_router
from recipecatalog.routers.shopping_list import router as shopping_list_router

__all__ = [
    "recipes_router",
    "shopping_list_router",
]
