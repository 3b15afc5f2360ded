from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime
from functools import partial
from typing import Optional

from app.db.dal import Database
from app.models.constants import PaymentStatus
from app.services.rate_service import RateService

"""Business summary roll-ups (today / month / payments / lifetime).

Design notes:
    The rate snapshot is read once, then eleven independent aggregate reads
    fan out concurrently, each on a worker thread with its own SQLite
    connection. The summary is composed only after every read has returned;
    if any read fails the whole call fails with that error (no partial
    summary).
"""

logger = logging.getLogger("app.summary")


@dataclass(frozen=True)
class TodayTotals:
    total_lak: float
    profit_total: float
    rate_profit: float
    other_profit: float
    orders_count: int


@dataclass(frozen=True)
class MonthTotals:
    total_lak: float
    profit_total: float
    period: str


@dataclass(frozen=True)
class PaymentTotals:
    paid_orders: int
    unpaid_orders: int
    unpaid_value_lak: float


@dataclass(frozen=True)
class SummaryResult:
    date: date
    rate: float
    rate_updated: Optional[datetime]
    today: TodayTotals
    month: MonthTotals
    payments: PaymentTotals
    gross_value_lak: float
    all_orders_count: int


async def summarize(db: Database, as_of: date | None = None) -> SummaryResult:
    as_of = as_of or date.today()
    snapshot = await asyncio.to_thread(RateService(db).get_snapshot)

    paid = PaymentStatus.PAID.value
    unpaid = PaymentStatus.UNPAID.value
    reads = (
        partial(db.sum_orders, "total_lak", order_date=as_of),
        partial(db.sum_orders, "net_profit_lak", order_date=as_of),
        partial(db.sum_orders, "rate_profit_lak", order_date=as_of),
        partial(db.count_orders, order_date=as_of),
        partial(db.sum_orders, "total_lak", month_of=as_of),
        partial(db.sum_orders, "net_profit_lak", month_of=as_of),
        partial(db.count_orders, payment_status=paid),
        partial(db.count_orders, payment_status=unpaid),
        partial(db.count_orders),
        partial(db.sum_orders, "total_lak", payment_status=unpaid),
        partial(db.sum_orders, "total_lak"),
    )
    (
        today_total,
        today_profit,
        today_rate_profit,
        today_count,
        month_total,
        month_profit,
        paid_count,
        unpaid_count,
        all_count,
        unpaid_value,
        gross_value,
    ) = await asyncio.gather(*(asyncio.to_thread(read) for read in reads))

    result = SummaryResult(
        date=as_of,
        rate=snapshot.rate,
        rate_updated=snapshot.updated_at,
        today=TodayTotals(
            total_lak=today_total,
            profit_total=today_profit,
            rate_profit=today_rate_profit,
            other_profit=today_profit - today_rate_profit,
            orders_count=today_count,
        ),
        month=MonthTotals(
            total_lak=month_total,
            profit_total=month_profit,
            period=as_of.strftime("%Y-%m"),
        ),
        payments=PaymentTotals(
            paid_orders=paid_count,
            unpaid_orders=unpaid_count,
            unpaid_value_lak=unpaid_value,
        ),
        gross_value_lak=gross_value,
        all_orders_count=all_count,
    )
    logger.debug(
        "summary computed",
        extra={"as_of": as_of.isoformat(), "orders": all_count, "rate": snapshot.rate},
    )
    return result
