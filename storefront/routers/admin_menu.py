from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.deps import RecordIdPath, get_store
from storefront.schemas.menu import MenuItemCreate, MenuItemOut, MenuItemUpdate
from storefront.store.entity_store import EntityStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/menu-items", tags=["admin-menu"])


@router.post("", response_model=MenuItemOut, status_code=status.HTTP_201_CREATED)
def create_menu_item(payload: MenuItemCreate, store: EntityStore = Depends(get_store)):
    item = store.create_menu_item(payload.to_fields())
    return MenuItemOut.from_record(item)


@router.put("/{menu_item_id}", response_model=MenuItemOut)
def update_menu_item(
    menu_item_id: RecordIdPath,
    payload: MenuItemUpdate,
    store: EntityStore = Depends(get_store),
):
    item = store.update_menu_item(menu_item_id, payload.changes())
    if not item:
        raise HTTPException(status_code=404, detail="Item não encontrado")
    return MenuItemOut.from_record(item)


@router.delete("/{menu_item_id}")
def delete_menu_item(menu_item_id: RecordIdPath, store: EntityStore = Depends(get_store)):
    if not store.delete_menu_item(menu_item_id):
        raise HTTPException(status_code=404, detail="Item não encontrado")
    logger.info("menu item removed id=%s", menu_item_id, extra={"menu_item_id": menu_item_id})
    return {"message": "Item removido com sucesso"}
