"""
app/i18n.py

Message catalog for user-facing import labels and notifications.
"""

from __future__ import annotations

DEFAULT_LOCALE = "en"

NEW_QUEST_LABEL = "quest_import.labels.new_quest"
IMPORT_SUCCESS = "quest_import.notifications.import_success"
IMPORT_PARTIAL = "quest_import.notifications.import_partial"
IMPORT_FAILURE = "quest_import.notifications.import_failure"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        NEW_QUEST_LABEL: "New Quest",
        IMPORT_SUCCESS: "Imported {count} quest(s).",
        IMPORT_PARTIAL: "Imported {success} quest(s); {fail} could not be imported.",
        IMPORT_FAILURE: "Quest import failed. Check the console for details.",
    },
    "de": {
        NEW_QUEST_LABEL: "Neue Quest",
        IMPORT_SUCCESS: "{count} Quest(s) importiert.",
        IMPORT_PARTIAL: "{success} Quest(s) importiert; {fail} konnten nicht importiert werden.",
        IMPORT_FAILURE: "Quest-Import fehlgeschlagen. Details stehen in der Konsole.",
    },
}


def _catalog(locale: str | None) -> dict[str, str]:
    normalized = (locale or DEFAULT_LOCALE).strip().lower()
    return MESSAGES.get(normalized) or MESSAGES[DEFAULT_LOCALE]


def localize(key: str, locale: str | None = None) -> str:
    """
    Return the message for ``key``, falling back to English, then to the key.
    """

    message = _catalog(locale).get(key)
    if message is None:
        message = MESSAGES[DEFAULT_LOCALE].get(key, key)
    return message


def format_message(key: str, locale: str | None = None, **params: object) -> str:
    template = localize(key, locale)
    try:
        return template.format(**params)
    except (KeyError, IndexError):
        return template
