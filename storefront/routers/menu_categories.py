from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.deps import RecordIdPath, get_store
from storefront.schemas.catalog import CategoryCreate, CategoryOut, CategoryUpdate
from storefront.store.entity_store import EntityStore

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[CategoryOut])
def list_categories(store: EntityStore = Depends(get_store)):
    return [CategoryOut.from_record(category) for category in store.get_categories()]


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, store: EntityStore = Depends(get_store)):
    category = store.create_category(payload.model_dump())
    return CategoryOut.from_record(category)


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: RecordIdPath,
    payload: CategoryUpdate,
    store: EntityStore = Depends(get_store),
):
    changes = payload.changes()
    with store.critical_section():
        current = store.get_category(category_id)
        if not current:
            raise HTTPException(status_code=404, detail="Categoria não encontrada")
        min_items = changes.get("min_items", current.min_items)
        max_items = changes.get("max_items", current.max_items)
        if max_items < min_items:
            raise HTTPException(status_code=400, detail="maxItems deve ser maior ou igual a minItems")
        category = store.update_category(category_id, changes)
    return CategoryOut.from_record(category)


@router.delete("/{category_id}")
def delete_category(category_id: RecordIdPath, store: EntityStore = Depends(get_store)):
    if not store.delete_category(category_id):
        raise HTTPException(status_code=404, detail="Categoria não encontrada")
    return {"message": "Categoria removida com sucesso"}
