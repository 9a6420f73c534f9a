"""
app/repositories package marker.
"""

from app.repositories.quest_repository import QuestPersistenceError, QuestRepository

__all__ = [
    "QuestPersistenceError",
    "QuestRepository",
]
