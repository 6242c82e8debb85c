"""Shared Pydantic configuration for the camelCase JSON API."""

from datetime import datetime
from typing import Optional

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.utils.time_utils import as_utc


class ApiOut(BaseModel):
    """Response model read from ORM attributes and serialised in camelCase."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class ApiIn(BaseModel):
    """Request body accepting camelCase (and snake_case) keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def utc_or_none(value: Optional[datetime]) -> Optional[datetime]:
    return as_utc(value) if value is not None else None
