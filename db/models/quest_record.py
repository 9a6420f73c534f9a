"""
db/models/quest_record.py

Persisted quest created from a sanitized import record.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import JSON, Boolean, Index, Integer, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin

JSONType = JSON().with_variant(JSONB(), "postgresql")


class QuestStatus:
    INACTIVE = "inactive"
    AVAILABLE = "available"
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


class SplashPosition:
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class QuestRecord(Base, TimestampMixin):
    __tablename__ = "quest_records"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=QuestStatus.INACTIVE,
        comment="inactive, available, active, completed, failed",
    )
    giver: Mapped[str | None] = mapped_column(Text, nullable=True)
    giver_data: Mapped[dict[str, Any] | None] = mapped_column(JSONType, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    gmnotes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    playernotes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[str] = mapped_column(Text, nullable=False, default="actor")
    giver_name: Mapped[str] = mapped_column(Text, nullable=False, default="actor")
    splash: Mapped[str] = mapped_column(Text, nullable=False, default="")
    splash_pos: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=SplashPosition.CENTER,
        comment="top, center, bottom",
    )
    splash_as_icon: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quest_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    subquests: Mapped[list[Any]] = mapped_column(JSONType, nullable=False, default=list)
    tasks: Mapped[list[Any]] = mapped_column(JSONType, nullable=False, default=list)
    rewards: Mapped[list[Any]] = mapped_column(JSONType, nullable=False, default=list)
    date: Mapped[dict[str, Any] | None] = mapped_column(
        JSONType,
        nullable=True,
        comment="create/start/end timestamps; null when none were imported",
    )

    __table_args__ = (
        Index("ix_quest_records_status", "status"),
        Index("ix_quest_records_created_at", "created_at"),
    )
