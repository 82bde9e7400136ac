import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from trackify.models.category import CategoryPublic

# Amounts are kept as Decimal internally and written to JSON as numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ExpenseCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    amount: Decimal = Field(gt=0)
    description: str
    date: dt.date
    category_id: int


class ExpensePublic(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    amount: Money
    description: str
    date: dt.date
    category_id: int
    user_id: int
    created_at: dt.datetime
    updated_at: dt.datetime
    category: Optional[CategoryPublic] = None


CENT = Decimal("0.01")


def quantize_amount(amount) -> Decimal:
    """Round to cents, half-up, as a decimal(10, 2) column would store it."""
    return Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
