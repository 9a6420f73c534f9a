"""
app/schemas/quest_import.py

Response schemas for quest import endpoints.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ImportFailureResponse(BaseModel):
    """
    API response model for one failed file or quest entry.
    """

    source: str
    code: str
    message: str
    candidate_index: int | None = Field(default=None, ge=0)


class ImportNotificationResponse(BaseModel):
    severity: str
    message_key: str
    params: dict[str, int] = Field(default_factory=dict)
    message: str


class QuestImportResponse(BaseModel):
    """
    API response model for a batch quest import.
    """

    success: int = Field(..., ge=0)
    fail: int = Field(..., ge=0)
    failures: list[ImportFailureResponse] = Field(default_factory=list)
    notification: ImportNotificationResponse | None = None


class QuestSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    status: str
    priority: int
    quest_type: str | None = None
    created_at: datetime
