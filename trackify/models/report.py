from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from trackify.models.expense import Money


class CategoryBreakdown(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    category_name: str
    total: Money
    percentage: float


class ExpenseSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: Money
    by_category: List[CategoryBreakdown]
