from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.deps import get_store
from storefront.schemas.settings import StoreSettingsOut, StoreSettingsUpdate
from storefront.store.entity_store import EntityStore

router = APIRouter(prefix="/api/store-settings", tags=["store-settings"])


@router.get("", response_model=StoreSettingsOut)
def get_store_settings(store: EntityStore = Depends(get_store)):
    return StoreSettingsOut.from_record(store.get_store_settings())


@router.put("", response_model=StoreSettingsOut)
def update_store_settings(payload: StoreSettingsUpdate, store: EntityStore = Depends(get_store)):
    return StoreSettingsOut.from_record(store.update_store_settings(payload.changes()))
