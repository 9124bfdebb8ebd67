"""
Catalog index: distinct categories and the flavors offered in each.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Sequence

import pandas as pd

from menurec.config import ALL_CATEGORIES_LABEL, INCLUDE_ALL_SENTINEL
from menurec.data.schemas import CatalogIndex, MenuItem


def _items_frame(items: Sequence[MenuItem]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "category": [item.category.strip() for item in items],
            "flavor": [item.flavor.strip() for item in items],
        }
    )


def build_index(
    items: Sequence[MenuItem],
    include_all_sentinel: bool = INCLUDE_ALL_SENTINEL,
    sentinel_label: str = ALL_CATEGORIES_LABEL,
) -> CatalogIndex:
    """Derive categories and flavors-by-category from the item set.

    Everything is kept in first-seen order so the result is identical for
    the same input. With the sentinel enabled it is listed first and maps to
    the flavors of every item regardless of category.
    """
    df = _items_frame(items)
    categories: list[str] = []
    flavors: dict[str, tuple[str, ...]] = {}

    if include_all_sentinel:
        categories.append(sentinel_label)
        flavors[sentinel_label] = tuple(df["flavor"].drop_duplicates().tolist())

    if not df.empty:
        for category, values in df.groupby("category", sort=False)["flavor"]:
            if include_all_sentinel and category == sentinel_label:
                continue  # a real category can't shadow the sentinel
            categories.append(category)
            flavors[category] = tuple(values.drop_duplicates().tolist())

    return CatalogIndex(
        categories=tuple(categories),
        flavors_by_category=MappingProxyType(flavors),
        sentinel=sentinel_label if include_all_sentinel else None,
    )
