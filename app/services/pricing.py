from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from app.models.order import OrderIn
from app.services.money import to_amount

"""Order pricing engine.

Turns a raw order plus the THB->LAK base rate into every derived LAK figure.
Two profits are reported separately:
    - rate_profit_lak: margin earned purely by charging the customer a rate
      other than the base rate (currency spread).
    - net_profit_lak: everything left after real costs, of which the spread is
      one component alongside fee and shipping markups.

The base rate is passed in rather than looked up, so `price` is pure: identical
arguments always give identical output and nothing is ever raised. A zero base
rate (no settings row yet) just zeroes the rate-dependent figures.
"""


@dataclass(frozen=True)
class PricedOrder:
    price_thb: float
    shipping_thb: float
    customer_rate: float
    service_fee_lak: float
    th_to_la_charge_lak: float
    actual_th_to_la_cost_lak: float
    rate: float
    price_lak: float
    shipping_lak: float
    total_lak: float
    rate_profit_lak: float
    net_profit_lak: float

    @property
    def cost_lak(self) -> float:
        """What the order cost the business, at the base rate."""
        return (
            (self.price_thb * self.rate)
            + (self.shipping_thb * self.rate)
            + self.actual_th_to_la_cost_lak
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def price(order: OrderIn, base_rate: float) -> PricedOrder:
    base_rate = to_amount(base_rate)
    customer_rate = order.customer_rate or base_rate

    price_thb = order.price_thb
    shipping_thb = order.shipping_thb
    service_fee = order.service_fee_lak
    th_to_la_charge = order.th_to_la_charge_lak
    actual_cost = order.actual_th_to_la_cost_lak

    price_lak = price_thb * customer_rate
    shipping_lak = shipping_thb * customer_rate
    total_lak = price_lak + shipping_lak + service_fee + th_to_la_charge

    rate_profit_lak = (price_thb + shipping_thb) * (customer_rate - base_rate)
    cost_lak = (price_thb * base_rate) + (shipping_thb * base_rate) + actual_cost
    net_profit_lak = total_lak - cost_lak

    return PricedOrder(
        price_thb=price_thb,
        shipping_thb=shipping_thb,
        customer_rate=customer_rate,
        service_fee_lak=service_fee,
        th_to_la_charge_lak=th_to_la_charge,
        actual_th_to_la_cost_lak=actual_cost,
        rate=base_rate,
        price_lak=price_lak,
        shipping_lak=shipping_lak,
        total_lak=total_lak,
        rate_profit_lak=rate_profit_lak,
        net_profit_lak=net_profit_lak,
    )


def build_order_record(order: OrderIn, priced: PricedOrder) -> Dict[str, Any]:
    """Flat column mapping for storage: descriptive inputs plus priced figures."""
    return {**order.descriptive_fields(), **priced.as_dict()}
