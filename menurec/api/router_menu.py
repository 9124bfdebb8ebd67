"""
Menu query endpoints — categories, flavors per category, filtered items.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from menurec.data.store import MenuStore
from menurec.api.dependencies import get_store
from menurec.api.response_models import (
    CategoriesResponse, FlavorsByCategoryResponse, FlavorsResponse, ItemsResponse, MenuItemModel,
)

router = APIRouter(prefix="/api", tags=["menu"])


@router.get("/categories", response_model=CategoriesResponse)
def list_categories(store: MenuStore = Depends(get_store)):
    return CategoriesResponse(categories=store.categories_available())


@router.get("/flavors", response_model=FlavorsResponse)
def list_flavors(
    category: str = Query("", description="Category name (or the all-categories label)"),
    store: MenuStore = Depends(get_store),
):
    """Flavors for the flavor dropdown once a category is picked."""
    return FlavorsResponse(category=category, flavors=store.flavors_for(category))


@router.get("/flavors-by-category", response_model=FlavorsByCategoryResponse)
def flavors_by_category(store: MenuStore = Depends(get_store)):
    return FlavorsByCategoryResponse(flavors_by_category=store.flavors_by_category())


@router.get("/items", response_model=ItemsResponse)
def filter_items(
    category: Optional[str] = Query(None),
    flavor: Optional[str] = Query(None),
    store: MenuStore = Depends(get_store),
):
    """Menu items matching the selected category and flavor.

    Leaving one of them out matches on the other alone; leaving both out
    returns the whole menu.
    """
    items = store.filter(category, flavor)
    return ItemsResponse(
        category=category or "",
        flavor=flavor or "",
        count=len(items),
        items=[MenuItemModel.from_item(i) for i in items],
    )
