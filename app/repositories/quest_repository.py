"""
app/repositories/quest_repository.py

Persistence layer for imported quests.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.quest_import import QuestImportRecord
from db.models.quest_record import QuestRecord


class QuestPersistenceError(RuntimeError):
    """
    Raised when a sanitized quest cannot be persisted.
    """


class QuestRepository:
    """
    SQLAlchemy-backed quest store. Each ``create`` commits on its own.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, record: QuestImportRecord) -> QuestRecord:
        """
        Persist one quest and return the created row.
        """

        row = QuestRecord(**self._to_columns(record))
        try:
            self._session.add(row)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise QuestPersistenceError(f"Failed to persist quest {record.name!r}.") from exc
        return row

    def count(self) -> int:
        return int(self._session.scalar(select(func.count()).select_from(QuestRecord)) or 0)

    def list_recent(self, *, limit: int = 50) -> list[QuestRecord]:
        stmt = (
            select(QuestRecord)
            .order_by(QuestRecord.created_at.desc(), QuestRecord.name.asc())
            .limit(max(1, limit))
        )
        return list(self._session.scalars(stmt).all())

    @staticmethod
    def _to_columns(record: QuestImportRecord) -> dict[str, Any]:
        payload = record.to_payload()
        return {
            "name": payload["name"],
            "status": payload["status"],
            "giver": payload["giver"],
            "giver_data": payload["giverData"],
            "description": payload["description"],
            "gmnotes": payload["gmnotes"],
            "playernotes": payload["playernotes"],
            "image": payload["image"],
            "giver_name": payload["giverName"],
            "splash": payload["splash"],
            "splash_pos": payload["splashPos"],
            "splash_as_icon": payload["splashAsIcon"],
            "location": payload["location"],
            "priority": payload["priority"],
            "quest_type": payload["type"],
            "parent_id": None,
            "subquests": payload["subquests"],
            "tasks": payload["tasks"],
            "rewards": payload["rewards"],
            "date": payload.get("date"),
        }
