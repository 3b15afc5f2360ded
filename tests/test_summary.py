"""Tests for summarize() against a real temporary SQLite database."""

import asyncio
from datetime import date

import pytest

from app.core.errors import StorageError
from app.db.dal import Database
from app.models.order import OrderIn
from app.services.pricing import build_order_record, price
from app.services.summary import summarize

AS_OF = date(2026, 3, 15)


def _add(db, base_rate=1300, **fields):
    order = OrderIn(**fields)
    priced = price(order, base_rate)
    db.insert_order(build_order_record(order, priced))
    return priced


def test_empty_ledger_summary_is_all_zero(db):
    result = asyncio.run(summarize(db, AS_OF))
    assert result.date == AS_OF
    assert result.rate == 0
    assert result.rate_updated is None
    assert result.today.total_lak == 0
    assert result.today.profit_total == 0
    assert result.today.rate_profit == 0
    assert result.today.other_profit == 0
    assert result.today.orders_count == 0
    assert result.month.total_lak == 0
    assert result.month.profit_total == 0
    assert result.month.period == "2026-03"
    assert result.payments.paid_orders == 0
    assert result.payments.unpaid_orders == 0
    assert result.payments.unpaid_value_lak == 0
    assert result.gross_value_lak == 0
    assert result.all_orders_count == 0


def test_summary_rolls_up_today_month_payments_and_lifetime(db):
    db.set_exchange_rate(1300)
    a = _add(db, order_date="2026-03-15", price_thb=100, shipping_thb=20,
             customer_rate=1350, service_fee_lak=5000, th_to_la_charge_lak=2000,
             actual_th_to_la_cost_lak=3000, payment_status="Paid")
    b = _add(db, order_date="2026-03-15", price_thb=50, customer_rate=1320)
    c = _add(db, order_date="2026-03-02", price_thb=10, service_fee_lak=1000)
    d = _add(db, order_date="2026-02-28", price_thb=40, payment_status="Paid")
    e = _add(db, order_date="2025-03-15", price_thb=70)

    result = asyncio.run(summarize(db, AS_OF))

    assert result.rate == 1300
    assert result.rate_updated is not None
    assert result.today.orders_count == 2
    assert result.today.total_lak == pytest.approx(a.total_lak + b.total_lak)
    assert result.today.profit_total == pytest.approx(a.net_profit_lak + b.net_profit_lak)
    assert result.today.rate_profit == pytest.approx(a.rate_profit_lak + b.rate_profit_lak)
    assert result.today.other_profit == pytest.approx(
        result.today.profit_total - result.today.rate_profit
    )
    assert result.month.total_lak == pytest.approx(a.total_lak + b.total_lak + c.total_lak)
    assert result.month.profit_total == pytest.approx(
        a.net_profit_lak + b.net_profit_lak + c.net_profit_lak
    )
    assert result.payments.paid_orders == 2
    assert result.payments.unpaid_orders == 3
    assert result.payments.unpaid_value_lak == pytest.approx(
        b.total_lak + c.total_lak + e.total_lak
    )
    assert result.all_orders_count == 5
    assert result.gross_value_lak == pytest.approx(
        sum(p.total_lak for p in (a, b, c, d, e))
    )


def test_month_period_handles_december(db):
    _add(db, order_date="2026-12-31", price_thb=1)
    _add(db, order_date="2027-01-01", price_thb=1)
    result = asyncio.run(summarize(db, date(2026, 12, 1)))
    assert result.month.period == "2026-12"
    assert result.month.total_lak == 1300
    assert result.today.orders_count == 0


def test_any_failed_read_fails_the_whole_summary(tmp_path):
    broken = Database(tmp_path / "unmigrated.sqlite3")
    with pytest.raises(StorageError):
        asyncio.run(summarize(broken, AS_OF))
