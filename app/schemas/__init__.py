"""
app/schemas package marker.
"""

from app.schemas.quest_import import (
    ImportFailureResponse,
    ImportNotificationResponse,
    QuestImportResponse,
    QuestSummaryResponse,
)

__all__ = [
    "ImportFailureResponse",
    "ImportNotificationResponse",
    "QuestImportResponse",
    "QuestSummaryResponse",
]
