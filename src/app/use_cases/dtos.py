"""Shared DTO base

DTOs serialize with camelCase aliases, which is what the admin console
consumes, while Python code keeps snake_case attribute names. Money stays a
Decimal in Python and goes over the wire as a JSON number.
"""

from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RowModel(BaseModel):
    """Table-shaped response, keys as stored (snake_case)"""

    model_config = ConfigDict(from_attributes=True)


class PaginationDTO(CamelModel):
    page: int
    limit: int
    total_count: int
    total_pages: int
