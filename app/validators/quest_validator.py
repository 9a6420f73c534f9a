"""
app/validators/quest_validator.py

Field-level sanitization of imported quest candidates.
"""

from __future__ import annotations

from typing import Any, Mapping

from app.domain.quest_import import FieldCoercion, QuestImportRecord, SanitizationResult
from app.i18n import NEW_QUEST_LABEL, localize
from app.validators.quest_sub_entities import (
    IdGenerator,
    generate_uuid4,
    sanitize_date,
    sanitize_giver_data,
    sanitize_rewards,
    sanitize_splash_pos,
    sanitize_tasks,
)
from db.models.quest_record import QuestStatus

ALLOWED_STATUSES = {
    QuestStatus.INACTIVE,
    QuestStatus.AVAILABLE,
    QuestStatus.ACTIVE,
    QuestStatus.COMPLETED,
    QuestStatus.FAILED,
}

DEFAULT_IMAGE = "actor"
DEFAULT_GIVER_NAME = "actor"

# Range of the store's integer priority column.
PRIORITY_MIN = -(2**31)
PRIORITY_MAX = 2**31 - 1


class QuestRecordSanitizer:
    """
    Coerces one quest candidate into a canonical ``QuestImportRecord``.

    Every field is checked on its own; a missing or wrong-typed value is
    replaced by its default and never affects another field. Only a
    candidate that is not an object at all is rejected.
    """

    def __init__(
        self,
        *,
        new_quest_label: str | None = None,
        locale: str | None = None,
        id_generator: IdGenerator = generate_uuid4,
    ) -> None:
        self._new_quest_label = new_quest_label or localize(NEW_QUEST_LABEL, locale)
        self._id_generator = id_generator

    def sanitize(self, candidate: Any) -> QuestImportRecord | None:
        result = self.sanitize_with_report(candidate)
        return result.record if result is not None else None

    def sanitize_with_report(self, candidate: Any) -> SanitizationResult | None:
        """
        Sanitize a candidate and report which fields fell back to defaults.

        Returns None when the candidate is not an object.
        """

        if not isinstance(candidate, Mapping):
            return None

        data = candidate
        coercions: list[FieldCoercion] = []

        name = self._parse_trimmed_string(data, "name", coercions)
        if name is None:
            name = self._new_quest_label

        giver_name = self._parse_trimmed_string(data, "giverName", coercions)

        tasks = sanitize_tasks(data.get("tasks"), id_generator=self._id_generator)
        self._record_dropped(data, "tasks", len(tasks), coercions)
        rewards = sanitize_rewards(data.get("rewards"), id_generator=self._id_generator)
        self._record_dropped(data, "rewards", len(rewards), coercions)

        giver_data = sanitize_giver_data(data.get("giverData"))
        if giver_data is None and data.get("giverData") is not None:
            coercions.append(self._coercion("giverData", "no identifying field", data.get("giverData")))

        date = sanitize_date(data.get("date"))
        if date is None and data.get("date") is not None:
            coercions.append(self._coercion("date", "no numeric value", data.get("date")))

        record = QuestImportRecord(
            name=name,
            status=self._parse_status(data, coercions),
            giver=self._parse_trimmed_string(data, "giver", coercions),
            giver_data=giver_data,
            description=self._parse_string(data, "description", "", coercions),
            gmnotes=self._parse_string(data, "gmnotes", "", coercions),
            playernotes=self._parse_string(data, "playernotes", "", coercions),
            image=self._parse_string(data, "image", DEFAULT_IMAGE, coercions),
            giver_name=giver_name if giver_name is not None else DEFAULT_GIVER_NAME,
            splash=self._parse_string(data, "splash", "", coercions),
            splash_pos=self._parse_splash_pos(data, coercions),
            splash_as_icon=self._parse_bool(data, "splashAsIcon", False, coercions),
            location=self._parse_trimmed_string(data, "location", coercions),
            priority=self._parse_priority(data, coercions),
            type=self._parse_trimmed_string(data, "type", coercions),
            tasks=tasks,
            rewards=rewards,
            date=date,
        )
        return SanitizationResult(record=record, coercions=tuple(coercions))

    def _parse_status(self, data: Mapping[str, Any], coercions: list[FieldCoercion]) -> str:
        value = data.get("status")
        if isinstance(value, str) and value in ALLOWED_STATUSES:
            return value
        if value is not None:
            coercions.append(self._coercion("status", "unknown status", value))
        return QuestStatus.INACTIVE

    def _parse_splash_pos(self, data: Mapping[str, Any], coercions: list[FieldCoercion]) -> str:
        value = data.get("splashPos")
        splash_pos = sanitize_splash_pos(value)
        if value is not None and splash_pos != value:
            coercions.append(self._coercion("splashPos", "unknown splash position", value))
        return splash_pos

    def _parse_priority(self, data: Mapping[str, Any], coercions: list[FieldCoercion]) -> int:
        value = data.get("priority")
        if value is None:
            return 0
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int) or isinstance(value, bool):
            coercions.append(self._coercion("priority", "not an integer", value))
            return 0
        if not PRIORITY_MIN <= value <= PRIORITY_MAX:
            coercions.append(self._coercion("priority", "out of range", value))
            return 0
        return value

    def _parse_string(
        self,
        data: Mapping[str, Any],
        key: str,
        default: str,
        coercions: list[FieldCoercion],
    ) -> str:
        value = data.get(key)
        if isinstance(value, str):
            return value
        if value is not None:
            coercions.append(self._coercion(key, "not a string", value))
        return default

    def _parse_trimmed_string(
        self,
        data: Mapping[str, Any],
        key: str,
        coercions: list[FieldCoercion],
    ) -> str | None:
        value = data.get(key)
        if isinstance(value, str):
            stripped = value.strip()
            if stripped:
                return stripped
            if value:
                coercions.append(self._coercion(key, "blank string", value))
            return None
        if value is not None:
            coercions.append(self._coercion(key, "not a string", value))
        return None

    def _parse_bool(
        self,
        data: Mapping[str, Any],
        key: str,
        default: bool,
        coercions: list[FieldCoercion],
    ) -> bool:
        value = data.get(key)
        if isinstance(value, bool):
            return value
        if value is not None:
            coercions.append(self._coercion(key, "not a boolean", value))
        return default

    def _record_dropped(
        self,
        data: Mapping[str, Any],
        key: str,
        kept: int,
        coercions: list[FieldCoercion],
    ) -> None:
        value = data.get(key)
        if value is None:
            return
        if not isinstance(value, list):
            coercions.append(self._coercion(key, "not an array", value))
        elif len(value) > kept:
            coercions.append(
                FieldCoercion(field=key, reason=f"dropped {len(value) - kept} non-object entries")
            )

    @staticmethod
    def _coercion(field_name: str, reason: str, value: Any) -> FieldCoercion:
        return FieldCoercion(field=field_name, reason=reason, value=QuestRecordSanitizer._stringify_value(value))

    @staticmethod
    def _stringify_value(value: Any) -> str | None:
        if value is None:
            return None
        try:
            text = repr(value)
        except RecursionError:
            return f"<deeply nested {type(value).__name__}>"
        return text if len(text) <= 80 else text[:77] + "..."
