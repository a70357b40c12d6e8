from sqlalchemy import Column, DateTime, Integer

from storefront.core.database import Base
from storefront.core.timeutils import utcnow


class Promotion(Base):
    __tablename__ = "promotions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    menu_item_id = Column(Integer, index=True, nullable=False)
    original_price_cents = Column(Integer, nullable=False)
    promotional_price_cents = Column(Integer, nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    is_active = Column(Integer, default=1, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
