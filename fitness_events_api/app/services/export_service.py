"""
CSV export of the database tables.

Used by the ``fitness-export-csv`` script to hand data to the
operations team.  Each table is written to ``<Model>.csv`` with a
header row, even when the table is empty.
"""

import csv
import logging
import sqlite3
from pathlib import Path
from typing import Dict, List, Tuple, Union

from ..core.db import get_connection

logger = logging.getLogger(__name__)

# (file stem, table name)
EXPORT_TABLES: List[Tuple[str, str]] = [
    ("User", "users"),
    ("Event", "events"),
    ("Trainer", "trainers"),
    ("EventTrainer", "event_trainers"),
    ("EventRegistration", "event_registrations"),
    ("EventReview", "event_reviews"),
    ("Invoice", "invoices"),
]


def export_table(cursor: sqlite3.Cursor, table: str, path: Path) -> int:
    """Write every row of ``table`` to ``path``.  Returns the row count."""
    cursor.execute(f"SELECT * FROM {table}")
    columns = [description[0] for description in cursor.description]
    rows = cursor.fetchall()
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(columns)
        writer.writerows(tuple(row) for row in rows)
    return len(rows)


def export_all(output_dir: Union[str, Path] = ".") -> Dict[str, Path]:
    """Export all known tables into ``output_dir``.

    A table that fails (missing table, unwritable file) is logged and
    skipped; the others are still exported.  Returns the written files
    keyed by model name.
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    conn = get_connection()
    try:
        cursor = conn.cursor()
        for model, table in EXPORT_TABLES:
            path = out / f"{model}.csv"
            try:
                count = export_table(cursor, table, path)
            except (sqlite3.Error, OSError) as e:
                logger.error("Failed to export %s: %s", model, e)
                continue
            logger.info("Exported %s (%d rows) to %s", model, count, path)
            written[model] = path
    finally:
        conn.close()
    return written
