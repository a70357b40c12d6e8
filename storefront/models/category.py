from sqlalchemy import Column, DateTime, Integer, String

from storefront.core.database import Base
from storefront.core.timeutils import utcnow


class Category(Base):
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    icon = Column(String, default="Utensils", nullable=False)
    min_items = Column(Integer, default=0, nullable=False)
    max_items = Column(Integer, default=100, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Integer, default=1, nullable=False)
    default_printer = Column(String, default="none", nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
