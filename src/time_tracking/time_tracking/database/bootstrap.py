from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

# A semicolon ends a statement only when an even number of single quotes follows it.
_STATEMENT_END = re.compile(r";(?=(?:[^']*'[^']*')*[^']*$)")


def _connect(target: DBConfig, *, with_database: bool = True):
    params = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "use_pure": True,
    }
    if with_database:
        params["database"] = target.database
    return mysql.connector.connect(**params)


def _strip_create_db_and_use(sql: str) -> str:
    # schema.sql stays usable whatever DB_NAME points at.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def _iter_sql_statements(sql: str) -> Iterable[str]:
    for stmt in _STATEMENT_END.split(sql):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def _exec_sql(cur, sql: str) -> int:
    count = 0
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)
        count += 1
    return count


@contextmanager
def _server_cursor(db_config: dict, *, with_database: bool = True):
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=with_database)
    try:
        cur = conn.cursor()
        yield target, cur
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    with _server_cursor(db_config, with_database=False) as (target, cur):
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )


def _apply_sql_file(db_config: dict, path: Path) -> int:
    sql = _strip_line_comments(_strip_create_db_and_use(path.read_text(encoding="utf-8")))
    with _server_cursor(db_config) as (target, cur):
        count = _exec_sql(cur, sql)
    logger.info("Applied %s (%d statements) to %s", path.name, count, target.label)
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _apply_sql_file(db_config, Path(schema_path))


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _apply_sql_file(db_config, Path(seed_path))


def list_tables(db_config: dict) -> list[str]:
    with _server_cursor(db_config) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]


def row_counts(db_config: dict, tables: Iterable[str] = ("employees", "time_logs")) -> dict[str, int]:
    with _server_cursor(db_config) as (_, cur):
        counts = {}
        for table in tables:
            cur.execute(f"SELECT COUNT(*) FROM `{table}`")
            counts[table] = int(cur.fetchone()[0])
        return counts
