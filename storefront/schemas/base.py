from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.core.money import to_cents
from storefront.core.timeutils import as_utc_naive

# faixa do INTEGER do SQLite (int64)
MAX_DB_INT = 2**63 - 1
MIN_DB_INT = -(2**63)

DbInt = Annotated[int, Field(ge=MIN_DB_INT, le=MAX_DB_INT)]
RecordId = Annotated[int, Field(le=MAX_DB_INT)]
# 1 = sim, 0 = não
Flag = Annotated[int, Field(ge=0, le=1)]
Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
# gravado sem fuso, em UTC
UtcDateTime = Annotated[datetime, AfterValidator(as_utc_naive)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatchModel(CamelModel):
    """
    Partial update payload.

    ``changes()`` returns only the fields sent by the client: a present field
    replaces the stored value, an absent one keeps it. ``null`` is treated as
    absent, except for the columns listed in ``nullable_fields``, where it
    clears the stored value. Fields named in ``money_fields`` are converted
    to their ``<name>_cents`` column.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()
    money_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in self.model_dump(exclude_unset=True).items():
            if value is None and key not in self.nullable_fields:
                continue
            if key in self.money_fields:
                result[f"{key}_cents"] = to_cents(value)
            else:
                result[key] = value
        return result
