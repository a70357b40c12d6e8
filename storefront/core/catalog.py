from __future__ import annotations

MENU_CATEGORIES = (
    "entradas",
    "principais",
    "massas",
    "sobremesas",
    "bebidas",
)

PAYMENT_METHODS = ("card", "pix", "cash")

ORDER_STATUS_PREPARING = "preparing"


def parse_payment_methods(raw: str | None) -> list[str]:
    """Splits the comma separated ``payment_methods`` setting, ignoring blanks."""
    return [method.strip().lower() for method in (raw or "").split(",") if method.strip()]
