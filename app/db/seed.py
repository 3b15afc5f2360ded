"""Seeding helper for the settings row.

`seed_exchange_rate` inserts the base THB->LAK rate only when no settings row
exists yet. An existing row is left untouched (operators own the rate once
set) so this can be safely re-run on every start.
"""

from __future__ import annotations
from pathlib import Path
import sqlite3

from .schema import init_db


def seed_exchange_rate(db_path: Path, exchange_rate: float) -> bool:
    """Return True when a new settings row was written."""
    if exchange_rate <= 0:
        raise ValueError("exchange_rate must be positive")
    init_db(db_path)  # ensure tables exist
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            "INSERT OR IGNORE INTO settings (id, exchange_rate) VALUES (1, ?)",
            (float(exchange_rate),),
        )
        conn.commit()
        return cur.rowcount > 0
    finally:
        conn.close()
