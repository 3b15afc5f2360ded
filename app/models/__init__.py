"""Pydantic domain models for the VAIexpress ledger."""

from .constants import (
    AMOUNT_FIELDS,
    DEFAULT_ORDER_STATUS,
    DERIVED_FIELDS,
    TEXT_FIELDS,
    PaymentStatus,
)  # re-export
from .order import OrderIn, OrderOut, OrderDeleted
from .rates import RateSettingsOut, RateUpdateIn
from .summary import Summary, TodaySummary, MonthSummary, PaymentsSummary

__all__ = [
    "AMOUNT_FIELDS",
    "DEFAULT_ORDER_STATUS",
    "DERIVED_FIELDS",
    "TEXT_FIELDS",
    "PaymentStatus",
    "OrderIn",
    "OrderOut",
    "OrderDeleted",
    "RateSettingsOut",
    "RateUpdateIn",
    "Summary",
    "TodaySummary",
    "MonthSummary",
    "PaymentsSummary",
]
