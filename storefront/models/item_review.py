from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text

from storefront.core.database import Base
from storefront.core.timeutils import utcnow


class ItemReview(Base):
    __tablename__ = "item_reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_item_reviews_rating"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True)
    menu_item_id = Column(Integer, index=True, nullable=False)
    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
