"""Shopping list consolidation, categorization and export."""

from recipecatalog.shopping.categories import (
    CATEGORY_RULES,
    Category,
    categorize,
    classify,
    item_identity,
)
from recipecatalog.shopping.consolidation import ConsolidatedItem, consolidate
from recipecatalog.shopping.export import format_shopping_list
from recipecatalog.shopping.shopping_list import ShoppingList, build_shopping_list

__all__ = [
    "CATEGORY_RULES",
    "Category",
    "ConsolidatedItem",
    "ShoppingList",
    "build_shopping_list",
    "categorize",
    "classify",
    "consolidate",
    "format_shopping_list",
    "item_identity",
]
