from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from storefront.models.scheduled_order import ScheduledOrder
from storefront.schemas.base import CamelModel, RecordId, UtcDateTime


class ScheduledOrderCreate(CamelModel):
    order_id: RecordId
    scheduled_date_time: UtcDateTime
    scheduled_type: Literal["delivery", "pickup"]
    notes: Optional[str] = None


class ScheduledOrderOut(CamelModel):
    id: int
    order_id: int
    scheduled_date_time: datetime
    scheduled_type: str
    notes: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_record(cls, scheduled: ScheduledOrder) -> "ScheduledOrderOut":
        return cls(
            id=scheduled.id,
            order_id=scheduled.order_id,
            scheduled_date_time=scheduled.scheduled_date_time,
            scheduled_type=scheduled.scheduled_type,
            notes=scheduled.notes,
            created_at=scheduled.created_at,
        )
