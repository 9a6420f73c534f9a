"""
Envelope detection for quest import payloads.

A parsed JSON document may wrap quest candidates in one of several shapes.
The checks below are ordered; the first match wins:

    1. a bare array                                 -> the array itself
    2. an object with an array ``quests``           -> that array
    3. an object with an array ``data``             -> that array
    4. an object embedding ``flags[scope].quest``   -> [quest]
    5. any other object                             -> [object]
    6. anything else                                -> []
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

QUEST_FLAG_SCOPE = "forien-quest-log"


class EnvelopeKind(str, Enum):
    ARRAY = "array"
    QUESTS_KEY = "quests_key"
    DATA_KEY = "data_key"
    FLAG_EMBEDDED = "flag_embedded"
    SINGLE_RECORD = "single_record"
    UNSUPPORTED = "unsupported"


def _flag_quest(payload: Mapping[str, Any]) -> Any:
    flags = payload.get("flags")
    if not isinstance(flags, Mapping):
        return None
    scope = flags.get(QUEST_FLAG_SCOPE)
    if not isinstance(scope, Mapping):
        return None
    quest = scope.get("quest")
    return quest if isinstance(quest, Mapping) else None


def classify_envelope(payload: Any) -> EnvelopeKind:
    """
    Return the envelope shape of a parsed JSON value. Never raises.
    """

    if isinstance(payload, list):
        return EnvelopeKind.ARRAY
    if not isinstance(payload, Mapping):
        return EnvelopeKind.UNSUPPORTED
    if isinstance(payload.get("quests"), list):
        return EnvelopeKind.QUESTS_KEY
    if isinstance(payload.get("data"), list):
        return EnvelopeKind.DATA_KEY
    if _flag_quest(payload) is not None:
        return EnvelopeKind.FLAG_EMBEDDED
    return EnvelopeKind.SINGLE_RECORD


class QuestPayloadNormalizer:
    """
    Extract quest candidates, in encounter order, from a parsed JSON value.
    """

    def normalize(self, payload: Any) -> list[Any]:
        kind = classify_envelope(payload)

        if kind is EnvelopeKind.ARRAY:
            return payload
        if kind is EnvelopeKind.QUESTS_KEY:
            return payload["quests"]
        if kind is EnvelopeKind.DATA_KEY:
            return payload["data"]
        if kind is EnvelopeKind.FLAG_EMBEDDED:
            return [_flag_quest(payload)]
        if kind is EnvelopeKind.SINGLE_RECORD:
            # Unrecognized objects are tried as one record rather than
            # reported as an empty payload.
            return [payload]
        return []
