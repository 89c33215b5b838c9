from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """``{"data": ...}`` envelope used by every JSON endpoint."""

    data: T
