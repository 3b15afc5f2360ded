from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class TodaySummary(BaseModel):
    total_lak: float
    profit_total: float
    rate_profit: float
    other_profit: float
    orders_count: int


class MonthSummary(BaseModel):
    total_lak: float
    profit_total: float
    period: str  # YYYY-MM


class PaymentsSummary(BaseModel):
    paid_orders: int
    unpaid_orders: int
    unpaid_value_lak: float


class Summary(BaseModel):
    date: date
    rate: float
    rate_updated: Optional[datetime] = None
    today: TodaySummary
    month: MonthSummary
    payments: PaymentsSummary
    gross_value_lak: float
    all_orders_count: int
