from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from storefront.core.catalog import MENU_CATEGORIES
from storefront.deps import RecordIdPath, get_store
from storefront.schemas.menu import MenuItemOut
from storefront.store.entity_store import EntityStore

router = APIRouter(prefix="/api/menu-items", tags=["menu"])


@router.get("", response_model=List[MenuItemOut])
def list_menu_items(store: EntityStore = Depends(get_store)):
    return [MenuItemOut.from_record(item) for item in store.get_menu_items()]


@router.get("/category/{category}", response_model=List[MenuItemOut])
def list_menu_items_by_category(category: str, store: EntityStore = Depends(get_store)):
    value = category.strip().lower()
    if value not in MENU_CATEGORIES:
        return []
    items = store.get_menu_items_by_category(value)
    return [MenuItemOut.from_record(item) for item in items]


@router.get("/{menu_item_id}", response_model=MenuItemOut)
def get_menu_item(menu_item_id: RecordIdPath, store: EntityStore = Depends(get_store)):
    item = store.get_menu_item(menu_item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item não encontrado")
    return MenuItemOut.from_record(item)
