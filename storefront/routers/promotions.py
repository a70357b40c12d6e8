from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.deps import RecordIdPath, get_store
from storefront.schemas.catalog import PromotionCreate, PromotionOut, PromotionUpdate
from storefront.store.entity_store import EntityStore

router = APIRouter(prefix="/api/promotions", tags=["promotions"])


def _require_menu_item(store: EntityStore, menu_item_id: int) -> None:
    if not store.get_menu_item(menu_item_id):
        raise HTTPException(status_code=404, detail="Item não encontrado")


@router.get("", response_model=List[PromotionOut])
def list_promotions(store: EntityStore = Depends(get_store)):
    return [PromotionOut.from_record(promotion) for promotion in store.get_promotions()]


@router.get("/active", response_model=List[PromotionOut])
def list_active_promotions(store: EntityStore = Depends(get_store)):
    return [PromotionOut.from_record(promotion) for promotion in store.get_active_promotions()]


@router.post("", response_model=PromotionOut, status_code=status.HTTP_201_CREATED)
def create_promotion(payload: PromotionCreate, store: EntityStore = Depends(get_store)):
    _require_menu_item(store, payload.menu_item_id)
    return PromotionOut.from_record(store.create_promotion(payload.to_fields()))


@router.put("/{promotion_id}", response_model=PromotionOut)
def update_promotion(
    promotion_id: RecordIdPath,
    payload: PromotionUpdate,
    store: EntityStore = Depends(get_store),
):
    changes = payload.changes()
    if "menu_item_id" in changes:
        _require_menu_item(store, changes["menu_item_id"])

    with store.critical_section():
        current = store.get_promotion(promotion_id)
        if not current:
            raise HTTPException(status_code=404, detail="Promoção não encontrada")
        start_date = changes.get("start_date", current.start_date)
        end_date = changes.get("end_date", current.end_date)
        if end_date < start_date:
            raise HTTPException(status_code=400, detail="endDate deve ser posterior a startDate")
        promotion = store.update_promotion(promotion_id, changes)
    return PromotionOut.from_record(promotion)


@router.delete("/{promotion_id}")
def delete_promotion(promotion_id: RecordIdPath, store: EntityStore = Depends(get_store)):
    if not store.delete_promotion(promotion_id):
        raise HTTPException(status_code=404, detail="Promoção não encontrada")
    return {"message": "Promoção removida com sucesso"}
