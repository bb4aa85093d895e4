"""
Shopping list categorization.

Categories, in list order:
- Produce
- Dairy & Eggs
- Meat & Seafood
- Pantry: staples measured in g, cup or tbsp
- Spices & Seasonings
- Other: everything unmatched
"""

from collections.abc import Callable, Iterable
from enum import Enum

from recipecatalog.normalize.quantities import normalize_name
from recipecatalog.shopping.consolidation import ConsolidatedItem


class Category(str, Enum):
    """Shopping list category. Declaration order is display order."""

    PRODUCE = "Produce"
    DAIRY_EGGS = "Dairy & Eggs"
    MEAT_SEAFOOD = "Meat & Seafood"
    PANTRY = "Pantry"
    SPICES_SEASONINGS = "Spices & Seasonings"
    OTHER = "Other"


# =============================================================================
# Keyword Tables
# =============================================================================

PRODUCE_KEYWORDS: tuple[str, ...] = (
    "tomato",
    "lettuce",
    "onion",
    "garlic",
    "pepper",
    "cucumber",
    "banana",
    "apple",
    "carrot",
    "broccoli",
)

DAIRY_KEYWORDS: tuple[str, ...] = ("milk", "cheese", "butter", "cream", "yogurt", "egg")

MEAT_KEYWORDS: tuple[str, ...] = (
    "chicken",
    "beef",
    "pork",
    "fish",
    "salmon",
    "shrimp",
    "turkey",
    "pancetta",
)

SPICE_KEYWORDS: tuple[str, ...] = (
    "salt",
    "pepper",
    "oregano",
    "basil",
    "cumin",
    "paprika",
    "vanilla",
    "cinnamon",
    "ginger",
)

# Gram, cup and tablespoon abbreviations
PANTRY_UNITS: frozenset[str] = frozenset({"g", "cup", "tbsp"})


def _name_contains_any(keywords: tuple[str, ...]) -> Callable[[ConsolidatedItem], bool]:
    def matches(item: ConsolidatedItem) -> bool:
        name = normalize_name(item.name)
        return any(keyword in name for keyword in keywords)

    return matches


def _unit_in(units: frozenset[str]) -> Callable[[ConsolidatedItem], bool]:
    def matches(item: ConsolidatedItem) -> bool:
        return normalize_name(item.unit) in units

    return matches


# Evaluated top to bottom, first match wins
CATEGORY_RULES: tuple[tuple[Category, Callable[[ConsolidatedItem], bool]], ...] = (
    (Category.PRODUCE, _name_contains_any(PRODUCE_KEYWORDS)),
    (Category.DAIRY_EGGS, _name_contains_any(DAIRY_KEYWORDS)),
    (Category.MEAT_SEAFOOD, _name_contains_any(MEAT_KEYWORDS)),
    (Category.SPICES_SEASONINGS, _name_contains_any(SPICE_KEYWORDS)),
    (Category.PANTRY, _unit_in(PANTRY_UNITS)),
)


def classify(item: ConsolidatedItem) -> Category:
    """
    Assign a shopping list category to an item.

    Args:
        item: The consolidated item.

    Returns:
        The first matching category, or Category.OTHER.
    """
    for category, matches in CATEGORY_RULES:
        if matches(item):
            return category
    return Category.OTHER


def categorize(items: Iterable[ConsolidatedItem]) -> dict[Category, list[ConsolidatedItem]]:
    """
    Group items by category.

    Every category is present, in display order, even when empty. Items
    keep their incoming order within a category.
    """
    groups: dict[Category, list[ConsolidatedItem]] = {category: [] for category in Category}
    for item in items:
        groups[classify(item)].append(item)
    return groups


def item_identity(item: ConsolidatedItem, category: Category) -> tuple[str, str, str]:
    """
    Stable identity of a list line across recomputation.

    Callers that track checked-off lines can key them by this tuple.
    """
    return normalize_name(item.name), normalize_name(item.unit), category.value
