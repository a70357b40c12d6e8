from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.store.entity_store import EntityStore

logger = logging.getLogger(__name__)
SEED_PREFIX = "[SEED]"

_IMAGE_BASE = "https://images.unsplash.com"

SAMPLE_MENU_ITEMS = [
    # Entradas
    {
        "name": "Bruschetta de Tomate e Manjericão",
        "description": "Pão artesanal tostado com tomates frescos, manjericão e azeite extra virgem",
        "price_cents": 1890,
        "category": "entradas",
        "image_url": f"{_IMAGE_BASE}/photo-1572695157366-5e585ab2b69f?w=800&h=600&fit=crop",
    },
    {
        "name": "Salada Caesar Gourmet",
        "description": "Alface romana, croutons artesanais, parmesão e molho caesar especial",
        "price_cents": 2490,
        "category": "entradas",
        "image_url": f"{_IMAGE_BASE}/photo-1512621776951-a57141f2eefd?w=800&h=600&fit=crop",
    },
    {
        "name": "Tábua de Antepastos",
        "description": "Seleção de queijos, embutidos, azeitonas e geleia artesanal",
        "price_cents": 3290,
        "category": "entradas",
        "image_url": f"{_IMAGE_BASE}/photo-1504674900247-0877df9cc836?w=800&h=600&fit=crop",
    },
    # Pratos principais
    {
        "name": "Salmão Grelhado com Legumes",
        "description": "Filé de salmão grelhado, acompanha legumes salteados e molho de ervas",
        "price_cents": 4590,
        "category": "principais",
        "image_url": f"{_IMAGE_BASE}/photo-1467003909585-2f8a72700288?w=800&h=600&fit=crop",
    },
    {
        "name": "Bife Ancho Grelhado",
        "description": "Corte premium grelhado na brasa, acompanha batatas rústicas e salada",
        "price_cents": 5290,
        "category": "principais",
        "image_url": f"{_IMAGE_BASE}/photo-1546833999-b9f581a1996d?w=800&h=600&fit=crop",
    },
    {
        "name": "Peito de Frango ao Molho de Cogumelos",
        "description": "Peito de frango grelhado com molho cremoso de cogumelos e risotto",
        "price_cents": 3890,
        "category": "principais",
        "image_url": f"{_IMAGE_BASE}/photo-1598515214211-89d3c73ae83b?w=800&h=600&fit=crop",
    },
    # Massas
    {
        "name": "Spaghetti Carbonara",
        "description": "Massa fresca com molho cremoso, bacon, ovos e parmesão ralado",
        "price_cents": 2890,
        "category": "massas",
        "image_url": f"{_IMAGE_BASE}/photo-1621996346565-e3dbc353d2e5?w=800&h=600&fit=crop",
    },
    {
        "name": "Fettuccine Alfredo",
        "description": "Fettuccine ao molho branco cremoso com frango grelhado e brócolis",
        "price_cents": 3290,
        "category": "massas",
        "image_url": f"{_IMAGE_BASE}/photo-1555949258-eb67b1ef0ceb?w=800&h=600&fit=crop",
    },
    # Sobremesas
    {
        "name": "Petit Gateau",
        "description": "Bolinho de chocolate quente com sorvete de baunilha e calda especial",
        "price_cents": 1690,
        "category": "sobremesas",
        "image_url": f"{_IMAGE_BASE}/photo-1563805042-7684c019e1cb?w=800&h=600&fit=crop",
    },
    {
        "name": "Tiramisu Clássico",
        "description": "Sobremesa italiana com camadas de mascarpone, café e cacau",
        "price_cents": 1490,
        "category": "sobremesas",
        "image_url": f"{_IMAGE_BASE}/photo-1571877227200-a0d98ea607e9?w=800&h=600&fit=crop",
    },
    # Bebidas
    {
        "name": "Vinho Tinto Reserva",
        "description": "Vinho tinto encorpado, ideal para acompanhar carnes",
        "price_cents": 4500,
        "category": "bebidas",
        "image_url": f"{_IMAGE_BASE}/photo-1510812431401-41d2bd2722f3?w=800&h=600&fit=crop",
    },
    {
        "name": "Suco Natural de Laranja",
        "description": "Suco de laranja fresco, espremido na hora",
        "price_cents": 890,
        "category": "bebidas",
        "image_url": f"{_IMAGE_BASE}/photo-1613478223719-2ab802602423?w=800&h=600&fit=crop",
    },
]

SAMPLE_CATEGORIES = [
    {"name": "Entradas", "icon": "Cookie", "min_items": 0, "max_items": 50, "display_order": 1},
    {"name": "Pratos Principais", "icon": "ChefHat", "min_items": 0, "max_items": 100, "display_order": 2},
    {"name": "Sobremesas", "icon": "IceCream", "min_items": 0, "max_items": 30, "display_order": 3},
    {"name": "Bebidas", "icon": "Coffee", "min_items": 0, "max_items": 50, "display_order": 4},
]


def seed_sample_data(store: "EntityStore") -> None:
    """Loads the sample menu and categories into an empty store."""
    with store.critical_section():
        if store.get_menu_items() or store.get_categories():
            logger.info("%s skipped: store already has data", SEED_PREFIX)
            return

        for item in SAMPLE_MENU_ITEMS:
            store.create_menu_item({**item, "available": 1})
        for category in SAMPLE_CATEGORIES:
            store.create_category({**category, "is_active": 1})

    logger.info(
        "%s loaded menu_items=%s categories=%s",
        SEED_PREFIX,
        len(SAMPLE_MENU_ITEMS),
        len(SAMPLE_CATEGORIES),
    )
