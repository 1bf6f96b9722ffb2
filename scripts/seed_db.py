"""Load the demo employees and check events from database/seed.sql.

Safe to run repeatedly: every insert is INSERT IGNORE.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.time_tracking.time_tracking.core.logging import configure_logging
from src.time_tracking.time_tracking.database.bootstrap import apply_seed_sql, row_counts

logger = logging.getLogger("seed_db")


def main() -> int:
    load_dotenv(override=False)
    configure_logging("INFO")
    db_config = dict(importlib.import_module(get_settings_module()).DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    counts = row_counts(db_config)
    logger.info("Seeded %s: %d employees, %d time logs", db_config["database"], counts["employees"], counts["time_logs"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
