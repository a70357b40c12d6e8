from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from storefront.core.errors import MenuItemNotFoundError, StorefrontError, StorePolicyError
from storefront.deps import get_store
from storefront.schemas.orders import CheckoutRequest, OrderConfirmation, OrderOut
from storefront.services.checkout import CHECKOUT_PREFIX, place_order
from storefront.store.entity_store import EntityStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderConfirmation, status_code=status.HTTP_201_CREATED)
def create_order(payload: CheckoutRequest, request: Request, store: EntityStore = Depends(get_store)):
    checkout = payload.root
    try:
        confirmation = place_order(store, checkout)
    except MenuItemNotFoundError as exc:
        logger.info("%s unknown menu item id=%s", CHECKOUT_PREFIX, exc.menu_item_id)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except StorePolicyError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except StorefrontError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("%s ERROR order creation failed", CHECKOUT_PREFIX)
        raise HTTPException(status_code=500, detail="Erro ao criar pedido") from exc

    # o endpoint roda no threadpool; o middleware lê o número pelo request.state
    request.state.order_number = confirmation.order_number
    return confirmation


@router.get("/{order_number}", response_model=OrderOut)
def get_order(order_number: str, store: EntityStore = Depends(get_store)):
    order = store.get_order(order_number)
    if not order:
        raise HTTPException(status_code=404, detail="Pedido não encontrado")
    return OrderOut.from_record(order, store.get_order_items(order.id))
