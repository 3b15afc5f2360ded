"""Data Access Layer for orders and the settings row.

Responsibilities
----------------
- Read and write the single settings row holding the base exchange rate.
- Provide CRUD helpers for orders. Records arrive fully priced; nothing here
  computes money.
- Offer aggregate reads (sums, counts) filtered by day, calendar month and
  payment status for the summary service.

Every public method opens its own connection, so calls are safe to run from
worker threads concurrently. Any `sqlite3.Error` surfaces as `StorageError`.
"""

from __future__ import annotations

import calendar
from contextlib import contextmanager
from datetime import date
from pathlib import Path
import sqlite3
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from app.core.errors import StorageError

UTC_NOW_SQL = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"
MAX_LIST_LIMIT = 200
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1

ORDER_COLUMNS: Tuple[str, ...] = (
    "order_date",
    "customer_name",
    "product_link",
    "price_thb",
    "shipping_thb",
    "rate",
    "customer_rate",
    "rate_profit_lak",
    "price_lak",
    "shipping_lak",
    "service_fee_lak",
    "th_to_la_charge_lak",
    "actual_th_to_la_cost_lak",
    "total_lak",
    "net_profit_lak",
    "payment_status",
    "order_status",
    "tracking_no",
    "carrier",
    "tracking_link",
)
SUMMABLE_COLUMNS = frozenset({"total_lak", "net_profit_lak", "rate_profit_lak"})


def month_bounds(day: date) -> Tuple[date, date]:
    """First and last day of `day`'s month (both inclusive)."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def _storable_id(order_id: int) -> bool:
    """Ids outside SQLite's INTEGER range can never match a row."""
    return SQLITE_MIN_INTEGER <= order_id <= SQLITE_MAX_INTEGER


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path

    # ------------------------------------------------------------------
    # Connection helpers
    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"cannot open database {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def ping(self) -> None:
        with self._connect() as conn:
            conn.execute("SELECT 1")

    # ------------------------------------------------------------------
    # Settings row
    def get_rate_settings(self) -> Optional[Dict[str, Any]]:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT exchange_rate, updated_at FROM settings WHERE id = 1")
            row = cur.fetchone()
            return dict(row) if row else None

    def set_exchange_rate(self, rate: float) -> None:
        with self._connect() as conn:
            conn.execute(
                f"""
                INSERT INTO settings (id, exchange_rate, updated_at)
                VALUES (1, ?, ({UTC_NOW_SQL}))
                ON CONFLICT(id) DO UPDATE SET
                    exchange_rate = excluded.exchange_rate,
                    updated_at = ({UTC_NOW_SQL})
                """,
                (float(rate),),
            )

    # ------------------------------------------------------------------
    # Order CRUD
    def insert_order(self, record: Mapping[str, Any]) -> int:
        columns = ", ".join(ORDER_COLUMNS)
        placeholders = ", ".join("?" for _ in ORDER_COLUMNS)
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                f"""
                INSERT INTO orders ({columns}, created_at, updated_at)
                VALUES ({placeholders}, ({UTC_NOW_SQL}), ({UTC_NOW_SQL}))
                """,
                tuple(record[c] for c in ORDER_COLUMNS),
            )
            return int(cur.lastrowid)

    def get_order(self, order_id: int) -> Optional[Dict[str, Any]]:
        if not _storable_id(order_id):
            return None
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT * FROM orders WHERE id = ?", (order_id,))
            row = cur.fetchone()
            return dict(row) if row else None

    def list_recent_orders(self, limit: int = 50) -> List[Dict[str, Any]]:
        """Newest order_date first, then newest id. `limit` is clamped to 1..200."""
        limit = max(1, min(int(limit), MAX_LIST_LIMIT))
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                "SELECT * FROM orders ORDER BY order_date DESC, id DESC LIMIT ?",
                (limit,),
            )
            return [dict(r) for r in cur.fetchall()]

    def update_order(self, order_id: int, record: Mapping[str, Any]) -> bool:
        """Replace every column of an order. Returns False when the id is absent."""
        if not _storable_id(order_id):
            return False
        assignments = ", ".join(f"{c} = ?" for c in ORDER_COLUMNS)
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                f"UPDATE orders SET {assignments}, updated_at = ({UTC_NOW_SQL}) WHERE id = ?",
                (*(record[c] for c in ORDER_COLUMNS), order_id),
            )
            return cur.rowcount > 0

    def delete_order(self, order_id: int) -> bool:
        if not _storable_id(order_id):
            return False
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("DELETE FROM orders WHERE id = ?", (order_id,))
            return cur.rowcount > 0

    # ------------------------------------------------------------------
    # Aggregations
    @staticmethod
    def _order_filters(
        order_date: Optional[date],
        month_of: Optional[date],
        payment_status: Optional[str],
    ) -> Tuple[str, List[Any]]:
        clauses: List[str] = []
        params: List[Any] = []
        if order_date is not None:
            clauses.append("order_date = ?")
            params.append(order_date.isoformat())
        if month_of is not None:
            start, end = month_bounds(month_of)
            clauses.append("order_date >= ? AND order_date <= ?")
            params.extend([start.isoformat(), end.isoformat()])
        if payment_status is not None:
            clauses.append("payment_status = ?")
            params.append(payment_status)
        where = " WHERE " + " AND ".join(clauses) if clauses else ""
        return where, params

    def sum_orders(
        self,
        column: str,
        *,
        order_date: Optional[date] = None,
        month_of: Optional[date] = None,
        payment_status: Optional[str] = None,
    ) -> float:
        """Sum a money column over matching orders; 0.0 when nothing matches."""
        if column not in SUMMABLE_COLUMNS:
            raise ValueError(f"cannot aggregate column '{column}'")
        where, params = self._order_filters(order_date, month_of, payment_status)
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(f"SELECT COALESCE(SUM({column}), 0) FROM orders{where}", params)
            row = cur.fetchone()
            return float(row[0] if row and row[0] is not None else 0)

    def count_orders(
        self,
        *,
        order_date: Optional[date] = None,
        month_of: Optional[date] = None,
        payment_status: Optional[str] = None,
    ) -> int:
        where, params = self._order_filters(order_date, month_of, payment_status)
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(f"SELECT COUNT(*) FROM orders{where}", params)
            row = cur.fetchone()
            return int(row[0] if row and row[0] is not None else 0)


__all__ = ["Database", "MAX_LIST_LIMIT", "ORDER_COLUMNS", "month_bounds"]
