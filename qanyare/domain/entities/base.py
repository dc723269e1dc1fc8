"""
Base models shared by every entity schema

JSON payloads use camelCase (``nameEn``, ``isApproved``); Python code uses the
snake_case field names. Both are accepted on input.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, FrozenSet

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; every stored timestamp is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base schema with camelCase aliases"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class PatchModel(CamelModel):
    """
    Partial update payload.

    Every field is optional; only fields present in the request are applied.
    An explicit null is accepted only for fields listed in ``nullable_fields``.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required_fields(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly sent by the caller, keyed by snake_case name"""
        return self.model_dump(exclude_unset=True)
