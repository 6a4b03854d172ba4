"""Schemas for the field registry endpoints."""

from typing import List

from pydantic import StrictInt

from ..models.field import Field
from ._strict_base import RequestModel, StrictModel


class FieldRequest(RequestModel):
    """Body for creating or replacing a field; range checks live in FieldService."""

    name: str = ""
    price_per_hour: StrictInt = 0
    location: str = ""


class FieldResponse(StrictModel):
    field_id: int
    name: str
    price_per_hour: int
    location: str

    @classmethod
    def from_field(cls, field: Field) -> "FieldResponse":
        return cls(
            field_id=field.id,
            name=field.name,
            price_per_hour=field.price_per_hour,
            location=field.location,
        )


class FieldEnvelope(StrictModel):
    message: str
    field: FieldResponse


class FieldListResponse(StrictModel):
    message: str
    fields: List[FieldResponse]
    count: int
