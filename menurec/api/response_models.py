"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from menurec.data.schemas import LoadResult, MenuItem


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    items: int
    categories: int
    source: str
    dropped: int
    loaded_at: Optional[str] = None


class CategoriesResponse(BaseModel):
    categories: list[str]


class FlavorsResponse(BaseModel):
    category: str
    flavors: list[str]


class FlavorsByCategoryResponse(BaseModel):
    flavors_by_category: dict[str, list[str]]


class MenuItemModel(BaseModel):
    name: str
    category: str
    flavor: str
    description: str = ""
    photo: str = ""
    price: Optional[float] = None

    @classmethod
    def from_item(cls, item: MenuItem) -> "MenuItemModel":
        return cls(
            name=item.name,
            category=item.category,
            flavor=item.flavor,
            description=item.description,
            photo=item.photo,
            price=item.price,
        )


class ItemsResponse(BaseModel):
    category: str = ""
    flavor: str = ""
    count: int
    items: list[MenuItemModel]


class LoadResponse(BaseModel):
    """Load-complete notification, as sent to the UI."""
    status: str
    message: str
    source: str
    items: int
    dropped: int
    categories: list[str]
    flavors_by_category: dict[str, list[str]]

    @classmethod
    def from_result(cls, result: LoadResult) -> "LoadResponse":
        return cls(
            status="loaded" if result.ok else "error",
            message=result.message,
            source=result.source,
            items=result.item_count,
            dropped=result.dropped,
            categories=list(result.categories),
            flavors_by_category={k: list(v) for k, v in result.flavors_by_category.items()},
        )
