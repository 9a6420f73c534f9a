"""
app/domain package marker.
"""

from app.domain.quest_import import (
    DateRange,
    FieldCoercion,
    GiverData,
    ImportFailure,
    ImportNotification,
    ImportTally,
    QuestImportRecord,
    RewardRecord,
    SanitizationResult,
    TaskRecord,
)

__all__ = [
    "DateRange",
    "FieldCoercion",
    "GiverData",
    "ImportFailure",
    "ImportNotification",
    "ImportTally",
    "QuestImportRecord",
    "RewardRecord",
    "SanitizationResult",
    "TaskRecord",
]
