from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CategoryCreate(BaseModel):
    name: str


class CategoryPublic(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    user_id: int
    created_at: datetime
    updated_at: datetime
