"""Shared base for stored records"""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Timezone-aware current time used for all record timestamps"""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Record(CamelModel):
    """
    A row held by the repository.

    Records are frozen: the repository replaces a row on update instead of
    mutating the instance callers already hold.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )
