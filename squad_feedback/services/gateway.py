"""Persistence gateway: the only code path that reads or writes storage.

Records are addressed by table name so callers stay independent of the ORM
classes behind them. Each write commits on its own; there are no
multi-table transactions, and callers that need cleanup after a partial
failure do it themselves (see ``services.responses``).
"""

import logging
import uuid
from typing import Any

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.types import Uuid

from squad_feedback.core.database import Base, get_db
from squad_feedback.core.exceptions import ConstraintError, RecordNotFoundError, StorageError
from squad_feedback.models import (
    Event,
    Form,
    QuestionResponse,
    Response,
    Template,
    TemplateQuestion,
    TemplateSection,
    User,
)

logger = logging.getLogger(__name__)

TABLES: dict[str, type[Base]] = {
    "events": Event,
    "forms": Form,
    "question_responses": QuestionResponse,
    "responses": Response,
    "template_questions": TemplateQuestion,
    "template_sections": TemplateSection,
    "templates": Template,
    "users": User,
}


def _error_message(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class Gateway:
    def __init__(self, db: Session) -> None:
        self.db = db

    # -----------------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------------

    def _model(self, table: str) -> type[Base]:
        model = TABLES.get(table)
        if model is None:
            raise StorageError(f"Unknown table: {table}")
        return model

    def _column(self, model: type[Base], name: str):
        column = model.__table__.columns.get(name)
        if column is None:
            raise StorageError(f"Column {name} does not exist on {model.__tablename__}")
        return column

    @staticmethod
    def _coerce(column, value: Any) -> Any:
        if isinstance(column.type, Uuid) and value is not None and not isinstance(value, uuid.UUID):
            try:
                return uuid.UUID(str(value))
            except ValueError:
                raise StorageError(f'invalid input syntax for type uuid: "{value}"') from None
        return value

    def _fail(self, table: str, action: str, exc: Exception) -> StorageError:
        self.db.rollback()
        message = _error_message(exc)
        logger.warning("%s on %s failed: %s", action, table, message)
        if isinstance(exc, IntegrityError):
            return ConstraintError(message)
        return StorageError(message)

    # -----------------------------------------------------------------------
    # Operations
    # -----------------------------------------------------------------------

    def get_by_id(self, table: str, record_id: Any):
        model = self._model(table)
        try:
            key = self._coerce(self._column(model, "id"), record_id)
        except StorageError:
            raise RecordNotFoundError(table, record_id) from None
        try:
            record = self.db.get(model, key)
        except SQLAlchemyError as exc:
            raise self._fail(table, "get", exc) from exc
        if record is None:
            raise RecordNotFoundError(table, record_id)
        return record

    def list_by(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list:
        model = self._model(table)
        query = select(model)
        for name, value in (filters or {}).items():
            column = self._column(model, name)
            query = query.where(column == self._coerce(column, value))
        if order_by is not None:
            column = self._column(model, order_by)
            query = query.order_by(column.desc() if descending else column.asc())
        try:
            return list(self.db.execute(query).scalars().all())
        except SQLAlchemyError as exc:
            raise self._fail(table, "list", exc) from exc

    def insert(self, table: str, values: dict[str, Any]):
        return self.insert_many(table, [values])[0]

    def insert_many(self, table: str, rows: list[dict[str, Any]]) -> list:
        """Insert ``rows`` in one commit; either all are stored or none."""
        model = self._model(table)
        try:
            records = [model(**self._prepare(model, row)) for row in rows]
        except TypeError as exc:
            raise StorageError(str(exc)) from exc
        self.db.add_all(records)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(table, "insert", exc) from exc
        for record in records:
            self.db.refresh(record)
        logger.debug("Inserted %d row(s) into %s", len(records), table)
        return records

    def update(self, table: str, record_id: Any, patch: dict[str, Any]):
        model = self._model(table)
        record = self.get_by_id(table, record_id)
        for name, value in self._prepare(model, patch).items():
            setattr(record, name, value)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(table, "update", exc) from exc
        self.db.refresh(record)
        return record

    def delete(self, table: str, record_id: Any) -> None:
        record = self.get_by_id(table, record_id)
        self.db.delete(record)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(table, "delete", exc) from exc

    def _prepare(self, model: type[Base], values: dict[str, Any]) -> dict[str, Any]:
        return {name: self._coerce(self._column(model, name), value) for name, value in values.items()}


def get_gateway(db: Session = Depends(get_db)) -> Gateway:
    return Gateway(db)
