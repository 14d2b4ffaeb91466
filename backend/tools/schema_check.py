"""
Detect SQLite schema mismatch (stale tables missing columns the models expect).
Used by create_schema to warn and exit non-zero instead of failing later at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from sqlalchemy import inspect

from models.base import Base

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection


def check_sqlite_schema_mismatch(sync_conn: "Connection") -> Tuple[bool, str]:
    """
    Compare every existing table with its model.
    Returns (has_mismatch, message). has_mismatch True means current schema is stale.
    """
    inspector = inspect(sync_conn)
    problems: List[str] = []
    for table_name, table in Base.metadata.tables.items():
        if not inspector.has_table(table_name):
            continue
        expected_columns = set(table.columns.keys())
        current_columns = {c["name"] for c in inspector.get_columns(table_name)}
        missing = expected_columns - current_columns
        if missing:
            problems.append(f"{table_name!r} is missing column(s): {sorted(missing)}")
    if problems:
        return True, (
            "; ".join(problems)
            + ". Run: python -m tools.reset_local_db (from backend dir) to reset the local DB and recreate schema."
        )
    return False, ""
