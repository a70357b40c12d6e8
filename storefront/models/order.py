from sqlalchemy import Column, DateTime, Integer, String, Text

from storefront.core.database import Base
from storefront.core.timeutils import utcnow


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    # preenchido logo após o flush, a partir do id
    order_number = Column(String, unique=True, index=True, nullable=True)

    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)

    delivery_type = Column(String, nullable=False)  # delivery / pickup
    address = Column(Text, nullable=True)
    address_number = Column(String, nullable=True)
    complement = Column(String, nullable=True)
    payment_method = Column(String, nullable=False)  # card / pix / cash

    subtotal_cents = Column(Integer, default=0, nullable=False)
    delivery_fee_cents = Column(Integer, default=0, nullable=False)
    total_cents = Column(Integer, default=0, nullable=False)

    status = Column(String, default="preparing", nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
