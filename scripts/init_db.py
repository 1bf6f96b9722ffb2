"""Create the database (if missing) and apply database/schema.sql.

Usage: python scripts/init_db.py [--seed]
"""

from __future__ import annotations

import argparse
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
from src.time_tracking.time_tracking.database.bootstrap import apply_schema, apply_seed_sql, list_tables
from src.time_tracking.time_tracking.database.connection import DBConfig

logger = logging.getLogger("init_db")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", action="store_true", help="also load database/seed.sql")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    configure_logging("INFO")
    db_config = dict(importlib.import_module(get_settings_module()).DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    if args.seed:
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    tables = list_tables(db_config)
    logger.info("%s ready: %s", DBConfig.from_dict(db_config).label, ", ".join(sorted(tables)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
