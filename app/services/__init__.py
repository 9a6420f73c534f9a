"""
app/services package marker.
"""

from app.services.import_files import ImportFile, ImportFileReadError, PathImportFile, UploadImportFile
from app.services.import_outcome import (
    LoggingNotificationSink,
    NotificationSeverity,
    build_import_notification,
    report_import_outcome,
)
from app.services.quest_import_service import (
    QuestImportService,
    QuestStore,
    get_quest_import_service,
)

__all__ = [
    "ImportFile",
    "ImportFileReadError",
    "LoggingNotificationSink",
    "NotificationSeverity",
    "PathImportFile",
    "QuestImportService",
    "QuestStore",
    "UploadImportFile",
    "build_import_notification",
    "get_quest_import_service",
    "report_import_outcome",
]
