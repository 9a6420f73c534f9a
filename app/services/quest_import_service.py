"""
app/services/quest_import_service.py

Service layer for batch quest JSON imports.

For each selected file, in order:

    1. read the text and parse it as JSON           (failure -> one fail for the file)
    2. extract quest candidates from the envelope   (none    -> one fail for the file)
    3. sanitize each candidate                      (invalid -> one fail for the candidate)
    4. hand the record to the store                 (raises  -> one fail for the candidate)

The batch is best-effort and non-transactional: records created before a
failure are kept. Files and candidates are processed strictly one at a time.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from functools import lru_cache
from typing import Any, Protocol

from app.config import get_quest_import_settings
from app.domain.quest_import import ImportFailure, ImportTally, QuestImportRecord
from app.failure_codes import EMPTY_PAYLOAD, INVALID_RECORD_SHAPE, PARSE_FAILURE, STORE_REJECTION
from app.logging_utils import log_event
from app.normalization.quest_payload_normalizer import QuestPayloadNormalizer
from app.services.import_files import ImportFile, ImportFileReadError
from app.validators.quest_validator import QuestRecordSanitizer

logger = logging.getLogger(__name__)


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"{constant} is not valid JSON.")


def _parse_json(text: str) -> Any:
    """
    Parse strict JSON; NaN and Infinity literals are rejected.
    """

    return json.loads(text, parse_constant=_reject_constant)


class QuestStore(Protocol):
    """
    Persistence collaborator that creates one quest per sanitized record.
    """

    def create(self, record: QuestImportRecord) -> Any:
        ...


class QuestImportService:
    """
    Coordinates reading, normalization, sanitization and store hand-off.
    """

    def __init__(
        self,
        *,
        normalizer: QuestPayloadNormalizer | None = None,
        sanitizer: QuestRecordSanitizer | None = None,
        log_coercions: bool = False,
    ) -> None:
        self._normalizer = normalizer or QuestPayloadNormalizer()
        self._sanitizer = sanitizer or QuestRecordSanitizer()
        self._log_coercions = log_coercions

    def import_files(self, files: Sequence[ImportFile], store: QuestStore) -> ImportTally:
        """
        Import every file and return the aggregate tally.

        Never raises for a malformed file, a malformed record or a store
        failure; those are counted in the tally instead.
        """

        tally = ImportTally()
        for import_file in files:
            tally = self._import_file(import_file, store, tally)

        log_event(
            logger,
            logging.INFO,
            "quest_import_completed",
            files=len(files),
            success=tally.success,
            fail=tally.fail,
        )
        return tally

    def _import_file(self, import_file: ImportFile, store: QuestStore, tally: ImportTally) -> ImportTally:
        source = import_file.name

        try:
            payload = _parse_json(import_file.read_text())
        except (ImportFileReadError, ValueError, RecursionError) as exc:
            log_event(logger, logging.ERROR, "quest_import_file_unreadable", file=source, error=str(exc))
            return tally.with_failure(
                ImportFailure(source=source, code=PARSE_FAILURE, message=str(exc))
            )

        candidates = self._normalizer.normalize(payload)
        if not candidates:
            log_event(logger, logging.WARNING, "quest_import_empty_payload", file=source)
            return tally.with_failure(
                ImportFailure(source=source, code=EMPTY_PAYLOAD, message="No quest data found in file.")
            )

        for index, candidate in enumerate(candidates):
            tally = self._import_candidate(
                source=source,
                index=index,
                candidate=candidate,
                store=store,
                tally=tally,
            )
        return tally

    def _import_candidate(
        self,
        *,
        source: str,
        index: int,
        candidate: Any,
        store: QuestStore,
        tally: ImportTally,
    ) -> ImportTally:
        result = self._sanitizer.sanitize_with_report(candidate)
        if result is None:
            log_event(
                logger,
                logging.WARNING,
                "quest_import_invalid_record",
                file=source,
                index=index,
                value_type=type(candidate).__name__,
            )
            return tally.with_failure(
                ImportFailure(
                    source=source,
                    code=INVALID_RECORD_SHAPE,
                    message="Quest entry is not an object.",
                    candidate_index=index,
                )
            )

        if self._log_coercions:
            for coercion in result.coercions:
                logger.debug(
                    "Quest import coercion file=%s index=%s field=%s reason=%s value=%s",
                    source,
                    index,
                    coercion.field,
                    coercion.reason,
                    coercion.value,
                )

        try:
            store.create(result.record)
        except Exception as exc:  # noqa: BLE001
            log_event(
                logger,
                logging.ERROR,
                "quest_import_store_rejected",
                exc_info=exc,
                file=source,
                index=index,
                quest=result.record.name,
            )
            return tally.with_failure(
                ImportFailure(
                    source=source,
                    code=STORE_REJECTION,
                    message=str(exc) or type(exc).__name__,
                    candidate_index=index,
                )
            )
        return tally.with_success()


@lru_cache(maxsize=1)
def get_quest_import_service() -> QuestImportService:
    """
    Build and cache the import service with env-driven settings.
    """
    settings = get_quest_import_settings()
    return QuestImportService(
        sanitizer=QuestRecordSanitizer(locale=settings.locale),
        log_coercions=settings.log_coercions,
    )
