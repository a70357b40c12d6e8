# storefront/deps.py
from __future__ import annotations

from typing import Annotated

from fastapi import Path, Request

from storefront.schemas.base import MAX_DB_INT
from storefront.store.entity_store import EntityStore

# ids fora do int64 nunca chegam ao banco
RecordIdPath = Annotated[int, Path(le=MAX_DB_INT)]


def get_store(request: Request) -> EntityStore:
    """Store criado na inicialização do app (``app.state.store``)."""
    return request.app.state.store
