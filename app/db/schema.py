"""Database schema DDL definitions and initialization utilities.

Tables:
  - settings: single row (id = 1) holding the THB->LAK base exchange rate
  - orders: one row per reselling transaction, inputs plus derived LAK figures
  - metadata: key/value store (schema version)
"""

from __future__ import annotations
import sqlite3
from typing import Sequence
from pathlib import Path

BASIC_UTC_NOW = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"

SETTINGS_DDL = f"""
CREATE TABLE IF NOT EXISTS settings (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    exchange_rate REAL NOT NULL, -- LAK per 1 THB
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

ORDERS_DDL = f"""
CREATE TABLE IF NOT EXISTS orders (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    order_date TEXT NOT NULL, -- ISO date (YYYY-MM-DD)
    customer_name TEXT NOT NULL DEFAULT '',
    product_link TEXT NOT NULL DEFAULT '',
    price_thb REAL NOT NULL DEFAULT 0,
    shipping_thb REAL NOT NULL DEFAULT 0,
    rate REAL NOT NULL DEFAULT 0, -- base rate snapshot at pricing time
    customer_rate REAL NOT NULL DEFAULT 0,
    rate_profit_lak REAL NOT NULL DEFAULT 0,
    price_lak REAL NOT NULL DEFAULT 0,
    shipping_lak REAL NOT NULL DEFAULT 0,
    service_fee_lak REAL NOT NULL DEFAULT 0,
    th_to_la_charge_lak REAL NOT NULL DEFAULT 0,
    actual_th_to_la_cost_lak REAL NOT NULL DEFAULT 0,
    total_lak REAL NOT NULL DEFAULT 0,
    net_profit_lak REAL NOT NULL DEFAULT 0,
    payment_status TEXT NOT NULL DEFAULT 'Unpaid' CHECK (payment_status IN ('Paid','Unpaid')),
    order_status TEXT NOT NULL DEFAULT 'Pending',
    tracking_no TEXT NOT NULL DEFAULT '',
    carrier TEXT NOT NULL DEFAULT '',
    tracking_link TEXT NOT NULL DEFAULT '',
    created_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW}),
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

METADATA_DDL = f"""
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

DDL_ORDER: Sequence[str] = (
    SETTINGS_DDL,
    ORDERS_DDL,
    METADATA_DDL,
)


def init_db(path: Path) -> None:
    """Create all tables idempotently.

    Parameters
    ----------
    path: Path to SQLite database file.
    """
    conn = sqlite3.connect(path)
    try:
        cur = conn.cursor()
        for ddl in DDL_ORDER:
            cur.execute(ddl)
        conn.commit()
    finally:
        conn.close()
