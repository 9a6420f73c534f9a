"""
app/domain/quest_import.py

Domain models used by the quest JSON import flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from app.i18n import format_message


@dataclass(frozen=True)
class GiverData:
    """
    Identifying data of the quest giver.

    At least one of uuid/name/img is set; an all-empty giver is represented
    by the absence of this object instead.
    """

    uuid: str | None = None
    name: str | None = None
    img: str | None = None
    has_token_img: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.uuid:
            payload["uuid"] = self.uuid
        if self.name:
            payload["name"] = self.name
        if self.img:
            payload["img"] = self.img
        payload["hasTokenImg"] = self.has_token_img
        return payload


@dataclass(frozen=True)
class TaskRecord:
    name: str
    completed: bool
    failed: bool
    hidden: bool
    id: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "completed": self.completed,
            "failed": self.failed,
            "hidden": self.hidden,
            "id": self.id,
        }


@dataclass(frozen=True)
class RewardRecord:
    type: str | None
    data: dict[str, Any]
    id: str
    hidden: bool = False
    locked: bool = True

    def to_payload(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "data": self.data,
            "hidden": self.hidden,
            "locked": self.locked,
            "id": self.id,
        }


@dataclass(frozen=True)
class DateRange:
    create: float | None = None
    start: float | None = None
    end: float | None = None

    def to_payload(self) -> dict[str, Any]:
        return {"create": self.create, "start": self.start, "end": self.end}


@dataclass(frozen=True)
class QuestImportRecord:
    """
    Canonical sanitized quest prepared for the store.

    ``parent`` and ``subquests`` are fixed: an import never attaches to an
    existing hierarchy.
    """

    name: str
    status: str
    description: str = ""
    gmnotes: str = ""
    playernotes: str = ""
    image: str = "actor"
    giver_name: str = "actor"
    splash: str = ""
    splash_pos: str = "center"
    splash_as_icon: bool = False
    priority: int = 0
    giver: str | None = None
    giver_data: GiverData | None = None
    location: str | None = None
    type: str | None = None
    tasks: tuple[TaskRecord, ...] = ()
    rewards: tuple[RewardRecord, ...] = ()
    date: DateRange | None = None
    parent: None = None
    subquests: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        """
        Return the store-facing mapping using the quest document field names.
        """

        payload: dict[str, Any] = {
            "name": self.name,
            "status": self.status,
            "giver": self.giver,
            "giverData": self.giver_data.to_payload() if self.giver_data else None,
            "description": self.description,
            "gmnotes": self.gmnotes,
            "playernotes": self.playernotes,
            "image": self.image,
            "giverName": self.giver_name,
            "splash": self.splash,
            "splashPos": self.splash_pos,
            "splashAsIcon": self.splash_as_icon,
            "location": self.location,
            "priority": self.priority,
            "type": self.type,
            "parent": None,
            "subquests": [],
            "tasks": [task.to_payload() for task in self.tasks],
            "rewards": [reward.to_payload() for reward in self.rewards],
        }
        if self.date is not None:
            payload["date"] = self.date.to_payload()
        return payload


@dataclass(frozen=True)
class FieldCoercion:
    """
    One field that was replaced by its default during sanitization.
    """

    field: str
    reason: str
    value: str | None = None


@dataclass(frozen=True)
class SanitizationResult:
    record: QuestImportRecord
    coercions: tuple[FieldCoercion, ...] = ()


@dataclass(frozen=True)
class ImportFailure:
    """
    One failed file or candidate inside a batch import.
    """

    source: str
    code: str
    message: str
    candidate_index: int | None = None


@dataclass(frozen=True)
class _FailureLink:
    failure: ImportFailure
    previous: _FailureLink | None


@dataclass(frozen=True)
class ImportTally:
    """
    Success/fail counters for one batch import invocation.

    Tallies are immutable: each step returns a new tally, counters only grow.
    Failures are chained newest-first, so recording one never copies the
    earlier ones.
    """

    success: int = 0
    fail: int = 0
    _last_failure: _FailureLink | None = field(default=None, repr=False, compare=False)

    @property
    def failures(self) -> tuple[ImportFailure, ...]:
        collected: list[ImportFailure] = []
        link = self._last_failure
        while link is not None:
            collected.append(link.failure)
            link = link.previous
        collected.reverse()
        return tuple(collected)

    @property
    def total(self) -> int:
        return self.success + self.fail

    def with_success(self) -> ImportTally:
        return replace(self, success=self.success + 1)

    def with_failure(self, failure: ImportFailure) -> ImportTally:
        return replace(
            self,
            fail=self.fail + 1,
            _last_failure=_FailureLink(failure=failure, previous=self._last_failure),
        )


@dataclass(frozen=True)
class ImportNotification:
    """
    User-facing outcome of a batch import.
    """

    severity: str
    message_key: str
    params: dict[str, int] = field(default_factory=dict)

    def render(self, locale: str | None = None) -> str:
        return format_message(self.message_key, locale, **self.params)
