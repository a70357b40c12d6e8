from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.deps import get_store
from storefront.schemas.scheduling import ScheduledOrderCreate, ScheduledOrderOut
from storefront.store.entity_store import EntityStore

router = APIRouter(prefix="/api/scheduled-orders", tags=["scheduled-orders"])


@router.get("", response_model=List[ScheduledOrderOut])
def list_scheduled_orders(store: EntityStore = Depends(get_store)):
    return [ScheduledOrderOut.from_record(scheduled) for scheduled in store.get_scheduled_orders()]


@router.post("", response_model=ScheduledOrderOut, status_code=status.HTTP_201_CREATED)
def create_scheduled_order(payload: ScheduledOrderCreate, store: EntityStore = Depends(get_store)):
    if not store.get_order_by_id(payload.order_id):
        raise HTTPException(status_code=404, detail="Pedido não encontrado")
    if not store.get_store_settings().allow_scheduling:
        raise HTTPException(status_code=409, detail="Agendamento desabilitado pela loja")
    return ScheduledOrderOut.from_record(store.create_scheduled_order(payload.model_dump()))
