"""Normalize ingredient names, keys and quantities."""

from recipecatalog.normalize.quantities import (
    DISPLAY_PLACES,
    consolidation_key,
    format_quantity,
    name_sort_key,
    normalize_name,
    round_half_up,
)

__all__ = [
    "DISPLAY_PLACES",
    "consolidation_key",
    "format_quantity",
    "name_sort_key",
    "normalize_name",
    "round_half_up",
]
