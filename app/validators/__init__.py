"""
app/validators package marker.
"""

from app.validators.quest_validator import ALLOWED_STATUSES, QuestRecordSanitizer

__all__ = [
    "ALLOWED_STATUSES",
    "QuestRecordSanitizer",
]
