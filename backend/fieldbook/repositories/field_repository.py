# backend/fieldbook/repositories/field_repository.py
import logging

from sqlalchemy.orm import Session

from ..models.field import Field
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class FieldRepository(BaseRepository[Field]):
    """Repository for Field data access; the generic CRUD covers every query."""

    def __init__(self, db: Session):
        super().__init__(db, Field)
        self.logger = logging.getLogger(__name__)
