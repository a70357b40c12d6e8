"""Conjunto de dados reutilizável para cenários de teste backend."""

BRUSCHETTA = {
    "name": "Bruschetta de Tomate e Manjericão",
    "description": "Pão artesanal tostado com tomates frescos, manjericão e azeite extra virgem",
    "price_cents": 1890,
    "category": "entradas",
    "image_url": "https://images.unsplash.com/photo-1572695157366-5e585ab2b69f",
}

CARBONARA = {
    "name": "Spaghetti Carbonara",
    "description": "Massa fresca com ovos, pancetta, parmesão e pimenta do reino",
    "price_cents": 2890,
    "category": "massas",
    "image_url": "",
}

TIRAMISU = {
    "name": "Tiramisu Clássico",
    "description": "Camadas de biscoito, café, mascarpone e cacau",
    "price_cents": 1490,
    "category": "sobremesas",
    "image_url": "",
}

PICKUP_CHECKOUT_PAYLOAD = {
    "customerName": "Maria Silva",
    "customerEmail": "maria@example.com",
    "customerPhone": "11999990000",
    "deliveryType": "pickup",
    "paymentMethod": "pix",
    "items": [{"menuItemId": 1, "quantity": 2}],
}

DELIVERY_CHECKOUT_PAYLOAD = {
    "customerName": "João Souza",
    "customerEmail": "joao@example.com",
    "customerPhone": "11988887777",
    "deliveryType": "delivery",
    "address": "Rua das Flores",
    "addressNumber": "123",
    "complement": "Apto 42",
    "paymentMethod": "card",
    "items": [{"menuItemId": 1, "quantity": 2}],
}

ADMIN_MENU_ITEM_PAYLOAD = {
    "name": "Risoto de Cogumelos",
    "description": "Arroz arbóreo, mix de cogumelos e parmesão",
    "price": "42.50",
    "category": "principais",
    "imageUrl": "",
}

REVIEW_PAYLOAD = {
    "menuItemId": 1,
    "customerName": "Ana",
    "customerEmail": "ana@example.com",
    "rating": 5,
    "comment": "Excelente",
}
