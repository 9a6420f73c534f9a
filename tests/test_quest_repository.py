"""
tests/test_quest_repository.py

QuestRepository against an in-memory SQLite database.
"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Integer, Text, create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from app.repositories.quest_repository import QuestPersistenceError, QuestRepository
from app.validators.quest_validator import QuestRecordSanitizer
from db.models.quest_record import QuestRecord


@pytest.fixture()
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    QuestRecord.__table__.create(engine)
    factory = sessionmaker(bind=engine, expire_on_commit=False)
    with factory() as db:
        yield db
    engine.dispose()


@pytest.fixture()
def sanitizer() -> QuestRecordSanitizer:
    return QuestRecordSanitizer(new_quest_label="New Quest", id_generator=lambda: "fixed-id")


def test_create_persists_sanitized_record(session: Session, sanitizer: QuestRecordSanitizer) -> None:
    record = sanitizer.sanitize(
        {
            "name": "Lost Ring",
            "status": "active",
            "giverData": {"name": "Elder"},
            "type": "main",
            "tasks": [{"name": "Search the well", "completed": True}],
            "rewards": [{"type": "item", "data": {"name": "Ring"}}],
            "date": {"create": 1700000000000},
        }
    )
    repository = QuestRepository(session)

    row = repository.create(record)

    assert row.id is not None
    stored = session.get(QuestRecord, row.id)
    assert stored.name == "Lost Ring"
    assert stored.status == "active"
    assert stored.quest_type == "main"
    assert stored.parent_id is None
    assert stored.subquests == []
    assert stored.giver_data == {"name": "Elder", "hasTokenImg": False}
    assert stored.tasks == [
        {"name": "Search the well", "completed": True, "failed": False, "hidden": False, "id": "fixed-id"}
    ]
    assert stored.rewards[0]["locked"] is True
    assert stored.date == {"create": 1700000000000, "start": None, "end": None}
    assert repository.count() == 1


def test_absent_date_is_stored_as_null(session: Session, sanitizer: QuestRecordSanitizer) -> None:
    row = QuestRepository(session).create(sanitizer.sanitize({}))

    assert session.get(QuestRecord, row.id).date is None


def test_list_recent_returns_created_rows(session: Session, sanitizer: QuestRecordSanitizer) -> None:
    repository = QuestRepository(session)
    for name in ("B", "A"):
        repository.create(sanitizer.sanitize({"name": name}))

    names = sorted(row.name for row in repository.list_recent(limit=10))

    assert names == ["A", "B"]
    assert len(repository.list_recent(limit=1)) == 1


def test_database_error_rolls_back_and_raises(sanitizer: QuestRecordSanitizer) -> None:
    db = MagicMock(spec=Session)
    db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

    with pytest.raises(QuestPersistenceError):
        QuestRepository(db).create(sanitizer.sanitize({"name": "Q"}))

    db.rollback.assert_called_once()


def test_columns_hold_every_sanitized_value(session: Session, sanitizer: QuestRecordSanitizer) -> None:
    columns = QuestRecord.__table__.c
    assert isinstance(columns.quest_type.type, Text)
    assert isinstance(columns.priority.type, Integer)

    quest_type = "t" * 500
    record = sanitizer.sanitize({"type": quest_type, "priority": 10**12})
    row = QuestRepository(session).create(record)

    stored = session.get(QuestRecord, row.id)
    assert stored.quest_type == quest_type
    assert stored.priority == 0
