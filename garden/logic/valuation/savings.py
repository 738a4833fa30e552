"""Savings estimate and catalog filtering.

Pure functions over the catalog and the user's in-progress selection; nothing
here mutates its inputs or touches storage.
"""
from __future__ import annotations
from typing import Iterable, Iterator, Mapping

from garden.domain.Plant import Plant
from garden.utilities.constants import ALL_CATEGORIES

__all__ = ["compute_total_savings", "filter_catalog", "format_money"]


def compute_total_savings(catalog: Iterable[Plant], selection: Mapping[str, int]) -> float:
    """Sum of quantity x yield x price over the catalog.

    Plants missing from the selection count as 0; a plant without a market
    price uses the fallback price. No rounding happens here.
    """
    total = 0.0
    for plant in catalog:
        qty = max(selection.get(plant.id, 0) or 0, 0)
        total += qty * plant.yield_per_plant_lbs * plant.price_per_lb
    return total


def filter_catalog(catalog: Iterable[Plant], search_term: str = "", category: str = ALL_CATEGORIES) -> Iterator[Plant]:
    """Lazily yield plants whose name contains search_term (case-insensitive)
    and whose category matches, unless category is "All"."""
    needle = (search_term or "").lower()
    for plant in catalog:
        if needle not in plant.name.lower():
            continue
        if category != ALL_CATEGORIES and plant.category != category:
            continue
        yield plant


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"
