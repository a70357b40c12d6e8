from __future__ import annotations

from contextvars import ContextVar


_REQUEST_ID_CTX: ContextVar[str | None] = ContextVar("request_id", default=None)
_ORDER_NUMBER_CTX: ContextVar[str | None] = ContextVar("order_number", default=None)


def set_request_context(*, request_id: str | None = None, order_number: str | None = None) -> None:
    if request_id is not None:
        _REQUEST_ID_CTX.set(request_id)
    if order_number is not None:
        _ORDER_NUMBER_CTX.set(order_number)


def get_request_id() -> str | None:
    return _REQUEST_ID_CTX.get()


def get_order_number() -> str | None:
    return _ORDER_NUMBER_CTX.get()


def clear_request_context() -> None:
    _REQUEST_ID_CTX.set(None)
    _ORDER_NUMBER_CTX.set(None)
