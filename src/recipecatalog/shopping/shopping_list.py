"""Shopping list generation from selected recipes."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from recipecatalog.logging_config import get_logger
from recipecatalog.schemas import Recipe
from recipecatalog.shopping.categories import Category, categorize
from recipecatalog.shopping.consolidation import ConsolidatedItem, consolidate
from recipecatalog.shopping.export import format_shopping_list

logger = get_logger(__name__)


@dataclass
class ShoppingList:
    """Complete shopping list for a set of recipes."""

    recipe_titles: list[str] = field(default_factory=list)
    items: list[ConsolidatedItem] = field(default_factory=list)

    # Grouped view, every category in display order
    items_by_category: dict[Category, list[ConsolidatedItem]] = field(default_factory=dict)

    @property
    def recipe_count(self) -> int:
        return len(self.recipe_titles)

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def non_empty_categories(self) -> list[tuple[Category, list[ConsolidatedItem]]]:
        """Categories that have at least one item, in display order."""
        return [(category, items) for category, items in self.items_by_category.items() if items]

    def to_text(self) -> str:
        """Render the list as exportable plain text."""
        return format_shopping_list(self.items_by_category, self.recipe_titles)


def build_shopping_list(recipes: Sequence[Recipe]) -> ShoppingList:
    """
    Build a categorized shopping list from recipe snapshots.

    Args:
        recipes: Selected recipes, in selection order.

    Returns:
        ShoppingList with consolidated, categorized items.
    """
    items = consolidate(recipes)
    shopping_list = ShoppingList(
        recipe_titles=[recipe.title for recipe in recipes],
        items=items,
        items_by_category=categorize(items),
    )

    logger.info(
        f"Generated shopping list: {shopping_list.item_count} items "
        f"from {shopping_list.recipe_count} recipes"
    )

    return shopping_list
