from sqlalchemy import Column, DateTime, Integer, String

from storefront.core.database import Base
from storefront.core.timeutils import utcnow


class StoreSettings(Base):
    __tablename__ = "store_settings"

    id = Column(Integer, primary_key=True)
    store_name = Column(String, default="Sabor Digital", nullable=False)
    store_phone = Column(String, default="(11) 99999-9999", nullable=False)
    store_email = Column(String, default="contato@sabordigital.com", nullable=False)
    store_address = Column(String, default="Rua das Flores, 123 - Centro", nullable=False)

    # flags 1/0
    is_open = Column(Integer, default=1, nullable=False)
    opening_time = Column(String, default="08:00", nullable=False)
    closing_time = Column(String, default="22:00", nullable=False)
    allow_pickup = Column(Integer, default=1, nullable=False)
    allow_checkout = Column(Integer, default=1, nullable=False)
    allow_scheduling = Column(Integer, default=1, nullable=False)
    allow_reviews = Column(Integer, default=1, nullable=False)
    allow_order_history = Column(Integer, default=1, nullable=False)

    delivery_time = Column(String, default="30-45 min", nullable=False)
    pickup_time = Column(String, default="15-20 min", nullable=False)
    delivery_fee_cents = Column(Integer, default=500, nullable=False)
    payment_methods = Column(String, default="card,pix,cash", nullable=False)  # separado por vírgula

    updated_at = Column(DateTime, default=utcnow, nullable=False)
