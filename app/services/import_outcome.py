"""
app/services/import_outcome.py

Maps an import tally to the single user-facing notification of a batch.
"""

from __future__ import annotations

import logging
from typing import Protocol

from app.domain.quest_import import ImportNotification, ImportTally
from app.i18n import IMPORT_FAILURE, IMPORT_PARTIAL, IMPORT_SUCCESS

logger = logging.getLogger(__name__)


class NotificationSeverity:
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    NotificationSeverity.INFO: logging.INFO,
    NotificationSeverity.WARNING: logging.WARNING,
    NotificationSeverity.ERROR: logging.ERROR,
}


class NotificationSink(Protocol):
    def notify(self, notification: ImportNotification) -> None:
        ...


class LoggingNotificationSink:
    """
    Emits rendered notifications through the standard logger.
    """

    def __init__(self, *, locale: str | None = None, target: logging.Logger | None = None) -> None:
        self._locale = locale
        self._logger = target or logger

    def notify(self, notification: ImportNotification) -> None:
        level = _LOG_LEVELS.get(notification.severity, logging.INFO)
        self._logger.log(level, notification.render(self._locale))


def build_import_notification(tally: ImportTally) -> ImportNotification | None:
    """
    Return the notification for a tally, or None when nothing was attempted.
    """

    if tally.success > 0 and tally.fail == 0:
        return ImportNotification(
            severity=NotificationSeverity.INFO,
            message_key=IMPORT_SUCCESS,
            params={"count": tally.success},
        )
    if tally.success > 0 and tally.fail > 0:
        return ImportNotification(
            severity=NotificationSeverity.WARNING,
            message_key=IMPORT_PARTIAL,
            params={"success": tally.success, "fail": tally.fail},
        )
    if tally.fail > 0:
        return ImportNotification(
            severity=NotificationSeverity.ERROR,
            message_key=IMPORT_FAILURE,
        )
    return None


def report_import_outcome(tally: ImportTally, sink: NotificationSink) -> ImportNotification | None:
    notification = build_import_notification(tally)
    if notification is not None:
        sink.notify(notification)
    return notification
