"""Merge ingredients from several recipes into shopping list lines."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from recipecatalog.logging_config import get_logger
from recipecatalog.normalize.quantities import (
    consolidation_key,
    format_quantity,
    name_sort_key,
    round_half_up,
)
from recipecatalog.schemas import Ingredient, Recipe

logger = get_logger(__name__)


@dataclass
class ConsolidatedItem:
    """An ingredient line combined from one or more recipes."""

    name: str
    quantity: float
    unit: str
    scalable: bool
    recipe_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_ingredient(cls, ingredient: Ingredient, recipe_id: str) -> "ConsolidatedItem":
        return cls(
            name=ingredient.name,
            quantity=ingredient.quantity,
            unit=ingredient.unit,
            scalable=ingredient.scalable,
            recipe_ids=[recipe_id],
        )

    @property
    def key(self) -> str:
        return consolidation_key(self.name, self.unit)

    @property
    def recipe_count(self) -> int:
        """Number of recipe contributions to this line."""
        return len(self.recipe_ids)

    @property
    def needs_adjustment(self) -> bool:
        """Non-scalable lines are bought to taste, not by the stated amount."""
        return not self.scalable

    def display_quantity(self) -> str:
        """Quantity as printed on the list (rounded only when scalable)."""
        if self.scalable:
            return format_quantity(round_half_up(self.quantity))
        return format_quantity(self.quantity)


@dataclass
class _Slot:
    """
    Mapping value used while consolidating.

    A slot created by the first occurrence of a key accumulates later
    scalable occurrences. A pinned slot holds a single recipe's occurrence
    that could not be merged and never accumulates.
    """

    item: ConsolidatedItem
    pinned: bool = False

    def accepts(self, ingredient: Ingredient) -> bool:
        return not self.pinned and self.item.scalable and ingredient.scalable

    def add(self, ingredient: Ingredient, recipe_id: str) -> None:
        self.item.quantity += ingredient.quantity
        self.item.recipe_ids.append(recipe_id)


def consolidate(recipes: Iterable[Recipe]) -> list[ConsolidatedItem]:
    """
    Combine the ingredients of several recipes into one deduplicated list.

    Ingredients sharing a consolidation key are summed (raw, unscaled
    quantities) when both sides are scalable. If either side is
    non-scalable the later occurrence becomes its own line, pinned to its
    recipe, so amounts like "salt to taste" are never added together.

    Args:
        recipes: Recipe snapshots in selection order.

    Returns:
        Consolidated items sorted by name, case-insensitively.
    """
    slots: dict[tuple[str, ...], _Slot] = {}
    pinned_counts: Counter[tuple[str, str]] = Counter()
    ingredient_count = 0

    for recipe in recipes:
        for ingredient in recipe.ingredients:
            ingredient_count += 1
            key = consolidation_key(ingredient.name, ingredient.unit)
            slot = slots.get((key,))

            if slot is None:
                slots[(key,)] = _Slot(ConsolidatedItem.from_ingredient(ingredient, recipe.id))
            elif slot.accepts(ingredient):
                slot.add(ingredient, recipe.id)
            else:
                occurrence = pinned_counts[(key, recipe.id)]
                pinned_counts[(key, recipe.id)] += 1
                slots[(key, recipe.id, str(occurrence))] = _Slot(
                    ConsolidatedItem.from_ingredient(ingredient, recipe.id),
                    pinned=True,
                )

    items = sorted((slot.item for slot in slots.values()), key=lambda i: name_sort_key(i.name))

    logger.debug(f"Consolidated {ingredient_count} ingredients into {len(items)} items")

    return items
