"""
app/normalization package marker.
"""

from app.normalization.quest_payload_normalizer import (
    EnvelopeKind,
    QuestPayloadNormalizer,
    classify_envelope,
)

__all__ = [
    "EnvelopeKind",
    "QuestPayloadNormalizer",
    "classify_envelope",
]
