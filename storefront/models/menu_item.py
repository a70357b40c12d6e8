from sqlalchemy import Column, DateTime, Integer, String, Text

from storefront.core.database import Base
from storefront.core.timeutils import utcnow


class MenuItem(Base):
    __tablename__ = "menu_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, default="", nullable=False)
    price_cents = Column(Integer, nullable=False)
    category = Column(String, index=True, nullable=False)  # entradas / principais / massas / sobremesas / bebidas
    image_url = Column(String, default="", nullable=False)
    available = Column(Integer, default=1, nullable=False)  # 1 = disponível, 0 = esgotado
    production_printer = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
