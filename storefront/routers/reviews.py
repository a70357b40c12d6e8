from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.deps import RecordIdPath, get_store
from storefront.schemas.reviews import ItemReviewCreate, ItemReviewOut, TopRatedItemOut
from storefront.store.entity_store import EntityStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["reviews"])


@router.post("/reviews", response_model=ItemReviewOut, status_code=status.HTTP_201_CREATED)
def create_review(payload: ItemReviewCreate, store: EntityStore = Depends(get_store)):
    if not store.get_menu_item(payload.menu_item_id):
        raise HTTPException(status_code=404, detail="Item não encontrado")
    if not store.get_store_settings().allow_reviews:
        raise HTTPException(status_code=409, detail="Avaliações desabilitadas pela loja")

    fields = payload.model_dump()
    fields["customer_email"] = str(payload.customer_email)
    review = store.create_item_review(fields)
    logger.info(
        "review created id=%s rating=%s",
        review.id,
        review.rating,
        extra={"menu_item_id": review.menu_item_id},
    )
    return ItemReviewOut.from_record(review)


@router.get("/reviews/{menu_item_id}", response_model=List[ItemReviewOut])
def list_item_reviews(menu_item_id: RecordIdPath, store: EntityStore = Depends(get_store)):
    return [ItemReviewOut.from_record(review) for review in store.get_item_reviews(menu_item_id)]


@router.get("/top-rated-items", response_model=List[TopRatedItemOut])
def list_top_rated_items(store: EntityStore = Depends(get_store)):
    return [TopRatedItemOut.from_rated(rated) for rated in store.get_top_rated_items()]
