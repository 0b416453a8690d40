from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        logger.exception("Database operation failed, rolling back")
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def encode_list(values: Optional[Sequence[str]]) -> Optional[str]:
    """MySQL has no array column; text lists are stored as JSON."""
    if values is None:
        return None
    return json.dumps(list(values))


def decode_list(value: Any) -> list[str]:
    if value is None or value == "":
        return []
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return [str(v) for v in json.loads(value)]
    return [str(v) for v in value]


def to_db(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return encode_list(value)
    return value


def build_insert(table: str, data: Dict[str, Any], columns: Iterable[str]) -> Tuple[str, tuple]:
    cols = [c for c in columns if c in data]
    placeholders = ",".join(["%s"] * len(cols))
    params = tuple(to_db(data[c]) for c in cols)
    return f"INSERT INTO {table}({', '.join(cols)}) VALUES({placeholders})", params


def build_update(
    table: str,
    key_column: str,
    key: int,
    changes: Dict[str, Any],
    columns: Iterable[str],
) -> Tuple[str, tuple]:
    """Build an UPDATE for the whitelisted columns present in `changes`."""

    allowed = [c for c in columns if c in changes]
    if not allowed:
        raise ValueError("No updatable columns given")
    assignments = ", ".join(f"{c}=%s" for c in allowed)
    params = tuple(to_db(changes[c]) for c in allowed) + (int(key),)
    return f"UPDATE {table} SET {assignments} WHERE {key_column}=%s", params
