"""
app/api/routers/quest_import.py

Quest import HTTP endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, UploadFile
from sqlalchemy.orm import Session

from app.api.dependencies import get_json_uploads
from app.config import QuestImportSettings, get_quest_import_settings
from app.domain.quest_import import ImportNotification, ImportTally
from app.repositories.quest_repository import QuestRepository
from app.schemas.quest_import import (
    ImportFailureResponse,
    ImportNotificationResponse,
    QuestImportResponse,
    QuestSummaryResponse,
)
from app.services.import_files import UploadImportFile
from app.services.import_outcome import LoggingNotificationSink, report_import_outcome
from app.services.quest_import_service import QuestImportService, get_quest_import_service
from db.session import get_db

router = APIRouter(prefix="/quests", tags=["quests"])


@router.post("/import", response_model=QuestImportResponse)
def import_quests(
    files: list[UploadFile] = Depends(get_json_uploads),
    locale: str | None = Query(default=None, description="Optional locale for the notification text"),
    db: Session = Depends(get_db),
    import_service: QuestImportService = Depends(get_quest_import_service),
    settings: QuestImportSettings = Depends(get_quest_import_settings),
) -> QuestImportResponse:
    """
    Import quests from one or more uploaded JSON files.
    """

    if not files:
        return QuestImportResponse(success=0, fail=0)

    resolved_locale = locale or settings.locale
    try:
        tally = import_service.import_files(
            [UploadImportFile(upload, max_bytes=settings.max_file_bytes) for upload in files],
            QuestRepository(db),
        )
    finally:
        for upload in files:
            upload.file.close()

    notification = report_import_outcome(tally, LoggingNotificationSink(locale=resolved_locale))
    return _to_response(tally, notification_locale=resolved_locale, notification=notification)


@router.get("", response_model=list[QuestSummaryResponse])
def list_quests(
    limit: int = Query(default=50, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[QuestSummaryResponse]:
    rows = QuestRepository(db).list_recent(limit=limit)
    return [QuestSummaryResponse.model_validate(row) for row in rows]


def _to_response(
    tally: ImportTally,
    *,
    notification_locale: str,
    notification: ImportNotification | None,
) -> QuestImportResponse:
    return QuestImportResponse(
        success=tally.success,
        fail=tally.fail,
        failures=[
            ImportFailureResponse(
                source=failure.source,
                code=failure.code,
                message=failure.message,
                candidate_index=failure.candidate_index,
            )
            for failure in tally.failures
        ],
        notification=(
            ImportNotificationResponse(
                severity=notification.severity,
                message_key=notification.message_key,
                params=notification.params,
                message=notification.render(notification_locale),
            )
            if notification is not None
            else None
        ),
    )
