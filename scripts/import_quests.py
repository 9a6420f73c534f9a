"""
Import quest JSON files from the command line.
"""

from __future__ import annotations

import argparse
import json
import logging
import os

from app.config import get_quest_import_settings
from app.repositories.quest_repository import QuestRepository
from app.services.import_files import PathImportFile
from app.services.import_outcome import LoggingNotificationSink, report_import_outcome
from app.services.quest_import_service import get_quest_import_service
from db.session import SessionLocal


def main() -> int:
    parser = argparse.ArgumentParser(description="Import quests from JSON files.")
    parser.add_argument("paths", nargs="*", help="JSON files to import.")
    parser.add_argument(
        "--locale",
        dest="locale",
        default=None,
        help="Optional locale for the outcome message.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").strip().upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if not args.paths:
        print(json.dumps({"success": 0, "fail": 0, "failures": [], "notification": None}, indent=2))
        return 0

    locale = args.locale or get_quest_import_settings().locale
    service = get_quest_import_service()
    with SessionLocal() as db:
        tally = service.import_files([PathImportFile(path) for path in args.paths], QuestRepository(db))

    notification = report_import_outcome(tally, LoggingNotificationSink(locale=locale))
    payload = {
        "success": tally.success,
        "fail": tally.fail,
        "failures": [
            {
                "source": failure.source,
                "code": failure.code,
                "message": failure.message,
                "candidate_index": failure.candidate_index,
            }
            for failure in tally.failures
        ],
        "notification": (
            {
                "severity": notification.severity,
                "message_key": notification.message_key,
                "params": notification.params,
                "message": notification.render(locale),
            }
            if notification is not None
            else None
        ),
    }
    print(json.dumps(payload, indent=2))
    return 0 if tally.fail == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
