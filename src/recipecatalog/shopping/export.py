"""Plain-text shopping list export."""

from collections.abc import Mapping, Sequence

from recipecatalog.shopping.categories import Category
from recipecatalog.shopping.consolidation import ConsolidatedItem

TITLE = "SHOPPING LIST"
TITLE_RULE_WIDTH = 40
CHECKBOX = "☐"


def format_item(item: ConsolidatedItem) -> str:
    """Render one list line, e.g. '☐ 1.5 cup flour'."""
    return f"{CHECKBOX} {item.display_quantity()} {item.unit} {item.name}"


def format_shopping_list(
    groups: Mapping[Category, Sequence[ConsolidatedItem]],
    source_recipe_titles: Sequence[str],
) -> str:
    """
    Render a categorized shopping list as exportable text.

    Categories are written in their fixed order and empty ones are left
    out. The output is identical for identical input.

    Args:
        groups: Items per category, as returned by categorize().
        source_recipe_titles: Titles of the recipes the list was built from.

    Returns:
        The export text, ending with a newline.
    """
    lines = [
        TITLE,
        "=" * TITLE_RULE_WIDTH,
        "",
        f"Generated from {len(source_recipe_titles)} recipe(s)",
        "",
    ]

    for category in Category:
        items = groups.get(category, ())
        if not items:
            continue
        lines.append(category.value.upper())
        lines.append("-" * len(category.value))
        lines.extend(format_item(item) for item in items)
        lines.append("")

    return "\n".join(lines) + "\n"
