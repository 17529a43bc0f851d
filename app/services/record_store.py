"""
Record Store - CRUD over a single table.

One RecordStore per table (talents, companies, users). Every call opens its
own session, so each mutation is one atomic statement. Uniqueness is left to
the database: a duplicate insert fails with IntegrityError and is reported as
ConflictError, which keeps concurrent duplicate submissions correct.

Rows come back as plain dicts keyed by column name.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import ConflictError, NotFoundError, UpstreamError, ValidationError
from app.db.postgres import get_db_session
from app.db.tables import LEAD_STATUSES, companies, talents, users

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Handles persistence for one entity table.

    Columns named in `protected` (id, created_at) can never be written by
    callers; the store assigns them.
    """

    protected = ("id", "created_at")

    def __init__(self, table: Table, entity: str):
        self.table = table
        self.entity = entity

    def _clean(self, values: Dict[str, Any]) -> Dict[str, Any]:
        columns = self.table.c.keys()
        cleaned = {k: v for k, v in values.items() if k in columns and k not in self.protected}
        if "status" in cleaned and cleaned["status"] not in LEAD_STATUSES:
            raise ValidationError(f"Invalid status '{cleaned['status']}'")
        return cleaned

    def insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a row and return it. Duplicate email raises ConflictError."""
        stmt = insert(self.table).values(**self._clean(values)).returning(*self.table.c)
        try:
            with get_db_session() as db:
                row = db.execute(stmt).mappings().one()
                return dict(row)
        except IntegrityError as e:
            logger.info("Duplicate %s rejected: %s", self.entity.lower(), e.orig)
            raise ConflictError("Email already registered")
        except SQLAlchemyError:
            logger.exception("Failed to insert %s", self.entity.lower())
            raise UpstreamError(f"Failed to create {self.entity.lower()}")

    def update(self, record_id: int, patch: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update. Only keys present in `patch` change.
        """
        values = self._clean(patch)
        if not values:
            raise ValidationError("No fields to update")

        stmt = (
            update(self.table)
            .where(self.table.c.id == record_id)
            .values(**values)
            .returning(*self.table.c)
        )
        try:
            with get_db_session() as db:
                row = db.execute(stmt).mappings().first()
                if row is None:
                    raise NotFoundError(f"{self.entity} not found")
                return dict(row)
        except IntegrityError as e:
            logger.info("Conflicting %s update rejected: %s", self.entity.lower(), e.orig)
            raise ConflictError("Email already registered")
        except SQLAlchemyError:
            logger.exception("Failed to update %s %s", self.entity.lower(), record_id)
            raise UpstreamError(f"Failed to update {self.entity.lower()}")

    def delete(self, record_id: int) -> Dict[str, Any]:
        """Delete a row and return what was removed."""
        stmt = delete(self.table).where(self.table.c.id == record_id).returning(*self.table.c)
        try:
            with get_db_session() as db:
                row = db.execute(stmt).mappings().first()
                if row is None:
                    raise NotFoundError(f"{self.entity} not found")
                return dict(row)
        except SQLAlchemyError:
            logger.exception("Failed to delete %s %s", self.entity.lower(), record_id)
            raise UpstreamError(f"Failed to delete {self.entity.lower()}")

    def list(self) -> List[Dict[str, Any]]:
        """All rows, newest first."""
        stmt = select(self.table).order_by(self.table.c.created_at.desc(), self.table.c.id.desc())
        try:
            with get_db_session() as db:
                return [dict(r) for r in db.execute(stmt).mappings().all()]
        except SQLAlchemyError:
            logger.exception("Failed to list %s", self.table.name)
            raise UpstreamError(f"Failed to fetch {self.table.name}")

    def get_by(self, column: str, value: Any) -> Optional[Dict[str, Any]]:
        stmt = select(self.table).where(self.table.c[column] == value)
        with get_db_session() as db:
            row = db.execute(stmt).mappings().first()
        return dict(row) if row else None


talent_store = RecordStore(talents, "Talent")
company_store = RecordStore(companies, "Company")
user_store = RecordStore(users, "User")
