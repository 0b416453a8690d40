"""Backup database.

Dumps every table to its own CSV file under backups/<timestamp>/, so a backup
needs no MySQL client tools on the machine.
"""

from __future__ import annotations

import importlib
import logging
import sys
from datetime import datetime
from pathlib import Path

import pandas as pd

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "school_dashboard"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from school_dashboard.database.bootstrap import fetch_table, list_tables

logger = logging.getLogger("scripts.backup")


def backup_tables(db_config: dict, out_dir: Path) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for table in list_tables(db_config):
        columns, rows = fetch_table(db_config, table)
        out_file = out_dir / f"{table}.csv"
        pd.DataFrame(rows, columns=columns).to_csv(out_file, index=False, encoding="utf-8-sig")
        logger.info("%s: %d rows", table, len(rows))
        written.append(out_file)
    return written


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s %(message)s")

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = REPO_ROOT / "backups" / f"{settings.DB_CONFIG['database']}_{ts}"
    files = backup_tables(dict(settings.DB_CONFIG), out_dir)
    logger.info("Backup created: %s (%d tables)", out_dir, len(files))


if __name__ == "__main__":
    main()
