# backend/fieldbook/routes/fields.py
"""
Field registry routes.

Reads are public; writes require an admin token.

Endpoints:
    GET /fields                          → List fields
    GET /fields/{field_id}               → Get one field
    POST /fields                         → Create field (admin)
    PUT /fields/{field_id}               → Replace field (admin)
    DELETE /fields/{field_id}            → Delete field (admin)
"""

import logging

from fastapi import APIRouter, Depends, status

from ..api.dependencies.auth import require_admin
from ..api.dependencies.services import get_field_service
from ..auth import UserPrincipal
from ..core.exceptions import DomainException, ValidationException
from ..errors import handle_domain_exception
from ..schemas._strict_base import MessageResponse
from ..schemas.field import FieldEnvelope, FieldListResponse, FieldRequest, FieldResponse
from ..services.field_service import FieldService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fields", tags=["fields"])


def parse_field_id(raw: str) -> int:
    """Path ids are parsed by hand so a bad id reads "Invalid field ID"."""
    try:
        field_id = int(raw)
    except ValueError:
        raise ValidationException("Invalid field ID")
    if field_id <= 0:
        raise ValidationException("Invalid field ID")
    return field_id


@router.get("", response_model=FieldListResponse)
def list_fields(field_service: FieldService = Depends(get_field_service)) -> FieldListResponse:
    try:
        fields = [FieldResponse.from_field(field) for field in field_service.list_fields()]
    except DomainException as e:
        handle_domain_exception(e)
    return FieldListResponse(
        message="Fields retrieved successfully",
        fields=fields,
        count=len(fields),
    )


@router.get("/{field_id}", response_model=FieldEnvelope)
def get_field(
    field_id: str,
    field_service: FieldService = Depends(get_field_service),
) -> FieldEnvelope:
    try:
        field = field_service.get_field(parse_field_id(field_id))
    except DomainException as e:
        handle_domain_exception(e)
    return FieldEnvelope(
        message="Field retrieved successfully",
        field=FieldResponse.from_field(field),
    )


@router.post("", response_model=FieldEnvelope, status_code=status.HTTP_201_CREATED)
def create_field(
    payload: FieldRequest,
    principal: UserPrincipal = Depends(require_admin),
    field_service: FieldService = Depends(get_field_service),
) -> FieldEnvelope:
    try:
        field = field_service.create_field(
            name=payload.name,
            price_per_hour=payload.price_per_hour,
            location=payload.location,
        )
    except DomainException as e:
        handle_domain_exception(e)
    logger.info(f"Admin {principal.user_id} created field {field.id}")
    return FieldEnvelope(
        message="Field created successfully",
        field=FieldResponse.from_field(field),
    )


@router.put("/{field_id}", response_model=FieldEnvelope)
def update_field(
    field_id: str,
    payload: FieldRequest,
    principal: UserPrincipal = Depends(require_admin),
    field_service: FieldService = Depends(get_field_service),
) -> FieldEnvelope:
    try:
        field = field_service.update_field(
            parse_field_id(field_id),
            name=payload.name,
            price_per_hour=payload.price_per_hour,
            location=payload.location,
        )
    except DomainException as e:
        handle_domain_exception(e)
    return FieldEnvelope(
        message="Field updated successfully",
        field=FieldResponse.from_field(field),
    )


@router.delete("/{field_id}", response_model=MessageResponse)
def delete_field(
    field_id: str,
    principal: UserPrincipal = Depends(require_admin),
    field_service: FieldService = Depends(get_field_service),
) -> MessageResponse:
    try:
        field_service.delete_field(parse_field_id(field_id))
    except DomainException as e:
        handle_domain_exception(e)
    logger.info(f"Admin {principal.user_id} deleted field {field_id}")
    return MessageResponse(message="Field deleted successfully")
