"""Shared wire-field policy for response-side models."""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.fields import FieldInfo

UInt32 = Annotated[int, Field(strict=True, ge=0, le=2**32 - 1)]
UInt64 = Annotated[int, Field(strict=True, ge=0, le=2**64 - 1)]


class OmitIfEmpty:
    """Annotated marker: drop the field from output when its value is empty."""

    def __repr__(self) -> str:
        return "OmitIfEmpty()"


def _omits_empty(field: FieldInfo) -> bool:
    return any(isinstance(meta, OmitIfEmpty) for meta in field.metadata)


class WireModel(BaseModel):
    """
    Base for models that are encoded back onto the wire.

    Fields whose value is None are never emitted. Fields annotated with
    ``OmitIfEmpty`` are also dropped when they hold an empty collection.
    Python attribute names and wire aliases are both accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_absent_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None or (not value and _omits_empty(field)):
                data.pop(name, None)
                if field.alias:
                    data.pop(field.alias, None)
        return data
