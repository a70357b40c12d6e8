from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Dados inválidos"
INTERNAL_ERROR_MESSAGE = "Erro interno"


class StorefrontError(ValueError):
    """Base for business-rule failures raised by the services."""


class MenuItemNotFoundError(StorefrontError):
    def __init__(self, menu_item_id: int) -> None:
        self.menu_item_id = menu_item_id
        super().__init__(f"Item {menu_item_id} não encontrado")


class MenuItemUnavailableError(StorefrontError):
    def __init__(self, menu_item_id: int) -> None:
        self.menu_item_id = menu_item_id
        super().__init__(f"Item {menu_item_id} indisponível")


class StorePolicyError(StorefrontError):
    """The store settings forbid the requested operation."""

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        self.status_code = status_code
        super().__init__(message)


def _field_path(loc: tuple) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts)


def format_validation_errors(errors: list[dict]) -> list[dict]:
    return [
        {
            "field": _field_path(tuple(error.get("loc", ()))),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(list(exc.errors()))
    logger.info(
        "validation failed fields=%s",
        ",".join(error["field"] for error in errors),
        extra={"endpoint": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=400, content={"detail": VALIDATION_MESSAGE, "errors": errors})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled error %s",
        type(exc).__name__,
        exc_info=exc,
        extra={"endpoint": request.url.path, "method": request.method, "status_code": 500},
    )
    return JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
