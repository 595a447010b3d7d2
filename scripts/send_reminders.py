"""Daily job: email members whose membership expires in two days.

Schedule with cron, e.g. `0 9 * * * python scripts/send_reminders.py`.
"""

from __future__ import annotations

import importlib
import logging
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.gym_admin.gym_admin.container import build_container


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        resend_api_key=getattr(settings, "RESEND_API_KEY", ""),
        notify_from=getattr(settings, "NOTIFY_FROM", ""),
    )

    report = container.reminder_service.send_expiry_reminders(today=date.today())
    print(f"OK: reminders sent={len(report.sent)} failed={len(report.failed)}")
    if report.failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
