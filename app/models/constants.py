"""Domain constants and enumerations for the THB->LAK ledger."""

from enum import Enum
from typing import Tuple

DEFAULT_ORDER_STATUS = "Pending"

# Caller supplied amounts. Anything unparseable is stored as 0.
AMOUNT_FIELDS: Tuple[str, ...] = (
    "price_thb",
    "shipping_thb",
    "service_fee_lak",
    "th_to_la_charge_lak",
    "actual_th_to_la_cost_lak",
)

TEXT_FIELDS: Tuple[str, ...] = (
    "customer_name",
    "product_link",
    "tracking_no",
    "carrier",
    "tracking_link",
)

# Computed by the pricing engine, never accepted from callers.
DERIVED_FIELDS: Tuple[str, ...] = (
    "rate",
    "price_lak",
    "shipping_lak",
    "total_lak",
    "rate_profit_lak",
    "net_profit_lak",
)


class PaymentStatus(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"

    @classmethod
    def parse(cls, value: str) -> "PaymentStatus":
        """Case-insensitive lookup; stored spelling stays `Paid` / `Unpaid`."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(
            f"payment_status must be one of {[m.value for m in cls]}, got {value!r}"
        )
