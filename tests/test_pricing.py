"""Tests for price() — pure THB->LAK pricing, no IO."""

import pytest

from app.models.order import OrderIn
from app.services.pricing import build_order_record, price
from app.db.dal import ORDER_COLUMNS


def _reference_order(**overrides) -> OrderIn:
    data = dict(
        price_thb=100,
        shipping_thb=20,
        customer_rate=1350,
        service_fee_lak=5000,
        th_to_la_charge_lak=2000,
        actual_th_to_la_cost_lak=3000,
    )
    data.update(overrides)
    return OrderIn(**data)


def test_reference_scenario():
    priced = price(_reference_order(), 1300)
    assert priced.price_lak == 135000
    assert priced.shipping_lak == 27000
    assert priced.total_lak == 169000
    assert priced.rate_profit_lak == 6000
    assert priced.net_profit_lak == 10000
    assert priced.cost_lak == 159000
    assert priced.rate == 1300
    assert priced.customer_rate == 1350


def test_same_arguments_give_identical_output():
    order = _reference_order(price_thb=123.45, shipping_thb=6.7, customer_rate=1333.3)
    assert price(order, 1299.99) == price(order, 1299.99)


def test_zero_base_rate_without_customer_rate_zeroes_rate_figures():
    order = _reference_order(customer_rate=None)
    priced = price(order, 0)
    assert priced.price_lak == 0
    assert priced.shipping_lak == 0
    assert priced.rate_profit_lak == 0
    assert priced.net_profit_lak == priced.total_lak - 3000
    assert priced.total_lak == 7000


@pytest.mark.parametrize("price_thb,shipping_thb", [(0, 0), (100, 20), (99999.5, 0.25)])
def test_customer_rate_equal_to_base_has_no_spread(price_thb, shipping_thb):
    order = _reference_order(
        price_thb=price_thb, shipping_thb=shipping_thb, customer_rate=1300
    )
    assert price(order, 1300).rate_profit_lak == 0


def test_missing_customer_rate_uses_base_rate():
    priced = price(_reference_order(customer_rate=None), 1300)
    assert priced.customer_rate == 1300
    assert priced.rate_profit_lak == 0
    assert priced.price_lak == 130000


def test_total_is_sum_of_components():
    order = _reference_order(
        price_thb=17.3, shipping_thb=4.1, service_fee_lak=999.9, th_to_la_charge_lak=0.7
    )
    priced = price(order, 1287.5)
    assert priced.total_lak == (
        priced.price_lak
        + priced.shipping_lak
        + order.service_fee_lak
        + order.th_to_la_charge_lak
    )


def test_net_profit_is_total_minus_base_rate_cost():
    order = _reference_order(price_thb=17.3, shipping_thb=4.1, customer_rate=1401.2)
    base = 1287.5
    priced = price(order, base)
    expected = priced.total_lak - (
        order.price_thb * base + order.shipping_thb * base + order.actual_th_to_la_cost_lak
    )
    assert priced.net_profit_lak == expected


def test_garbage_amounts_price_as_zero():
    order = OrderIn(price_thb="abc", shipping_thb=None, service_fee_lak="", customer_rate="x")
    priced = price(order, 1300)
    assert priced.price_thb == 0
    assert priced.shipping_thb == 0
    assert priced.customer_rate == 1300
    assert priced.total_lak == 0
    assert priced.net_profit_lak == 0


def test_garbage_base_rate_is_treated_as_zero():
    priced = price(_reference_order(customer_rate=None), "not-a-rate")
    assert priced.rate == 0
    assert priced.total_lak == 7000


def test_negative_amounts_are_accepted():
    priced = price(_reference_order(price_thb=-100, shipping_thb=0), 1300)
    assert priced.price_lak == -135000
    assert priced.rate_profit_lak == -5000


def test_build_order_record_covers_every_column():
    order = _reference_order(customer_name="Noy", payment_status="Paid")
    record = build_order_record(order, price(order, 1300))
    assert set(ORDER_COLUMNS) <= set(record)
    assert record["payment_status"] == "Paid"
    assert record["order_date"] == order.order_date.isoformat()
    assert record["rate"] == 1300
