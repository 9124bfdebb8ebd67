"""
Record and index types for the in-memory menu.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class MenuItem:
    """One offered item. Built only from a row that passed validation."""
    name: str
    category: str
    flavor: str
    description: str = ""
    photo: str = ""
    price: Optional[float] = None      # only in menus that track price

    def to_dict(self) -> dict:
        """Record keyed by the source column names."""
        data = {
            "Name": self.name,
            "Category": self.category,
            "Flavor": self.flavor,
            "Description": self.description,
            "Photo": self.photo,
        }
        if self.price is not None:
            data["Price"] = self.price
        return data


@dataclass(frozen=True)
class CatalogIndex:
    """Distinct categories and flavors-per-category derived from the items."""
    categories: tuple[str, ...] = ()
    flavors_by_category: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    sentinel: Optional[str] = None     # label of the synthetic "all" entry, if any

    def flavors_for(self, category: str) -> tuple[str, ...]:
        return self.flavors_by_category.get(category, ())

    def as_dict(self) -> dict[str, list[str]]:
        return {k: list(v) for k, v in self.flavors_by_category.items()}


@dataclass(frozen=True)
class MenuSnapshot:
    """Everything the query engine reads. Replaced whole, never patched."""
    items: tuple[MenuItem, ...]
    index: CatalogIndex
    source: str = ""
    dropped: int = 0
    loaded_at: dt.datetime = field(default_factory=dt.datetime.now)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one load, delivered to the caller and every listener."""
    ok: bool
    message: str
    source: str = ""
    categories: tuple[str, ...] = ()
    flavors_by_category: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    item_count: int = 0
    dropped: int = 0

    @classmethod
    def success(cls, snapshot: MenuSnapshot) -> "LoadResult":
        return cls(
            ok=True,
            message="Menu data loaded successfully!",
            source=snapshot.source,
            categories=snapshot.index.categories,
            flavors_by_category=snapshot.index.flavors_by_category,
            item_count=len(snapshot.items),
            dropped=snapshot.dropped,
        )

    @classmethod
    def failure(cls, message: str, source: str = "") -> "LoadResult":
        return cls(ok=False, message=message, source=source)
