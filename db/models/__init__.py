"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.quest_record import QuestRecord, QuestStatus, SplashPosition

__all__ = [
    "QuestRecord",
    "QuestStatus",
    "SplashPosition",
]
