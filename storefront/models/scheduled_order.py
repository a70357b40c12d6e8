from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from storefront.core.database import Base
from storefront.core.timeutils import utcnow


class ScheduledOrder(Base):
    __tablename__ = "scheduled_orders"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id"), index=True, nullable=False)
    scheduled_date_time = Column(DateTime, nullable=False)
    scheduled_type = Column(String, nullable=False)  # delivery / pickup
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
