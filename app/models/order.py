from __future__ import annotations
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.services.money import to_amount
from .constants import (
    AMOUNT_FIELDS,
    DEFAULT_ORDER_STATUS,
    TEXT_FIELDS,
    PaymentStatus,
)


class OrderIn(BaseModel):
    """Raw order submission.

    Amounts are coerced permissively (missing or non-numeric -> 0) and text
    fields default to empty strings. Derived LAK figures sent by a client are
    ignored; they are always recomputed from these inputs.
    """

    model_config = ConfigDict(extra="ignore")

    order_date: date = Field(default_factory=date.today)
    customer_name: str = ""
    product_link: str = ""
    price_thb: float = 0.0
    shipping_thb: float = 0.0
    service_fee_lak: float = 0.0
    th_to_la_charge_lak: float = 0.0
    actual_th_to_la_cost_lak: float = 0.0
    customer_rate: Optional[float] = None  # None -> base rate
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    order_status: str = DEFAULT_ORDER_STATUS
    tracking_no: str = ""
    carrier: str = ""
    tracking_link: str = ""

    @field_validator(*AMOUNT_FIELDS, mode="before")
    @classmethod
    def _coerce_amount(cls, v: Any) -> float:
        return to_amount(v)

    @field_validator("customer_rate", mode="before")
    @classmethod
    def _coerce_customer_rate(cls, v: Any) -> Optional[float]:
        # 0 and garbage both mean "charge the base rate"
        return to_amount(v) or None

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("order_status", mode="before")
    @classmethod
    def _default_order_status(cls, v: Any) -> str:
        text = "" if v is None else str(v).strip()
        return text or DEFAULT_ORDER_STATUS

    @field_validator("payment_status", mode="before")
    @classmethod
    def _parse_payment_status(cls, v: Any) -> Any:
        if v is None or v == "":
            return PaymentStatus.UNPAID
        if isinstance(v, str):
            return PaymentStatus.parse(v)
        return v

    @field_validator("order_date", mode="before")
    @classmethod
    def _default_order_date(cls, v: Any) -> Any:
        if v is None or v == "":
            return date.today()
        return v

    def descriptive_fields(self) -> dict:
        """Non-monetary columns, ready for storage."""
        return {
            "order_date": self.order_date.isoformat(),
            "customer_name": self.customer_name,
            "product_link": self.product_link,
            "payment_status": self.payment_status.value,
            "order_status": self.order_status,
            "tracking_no": self.tracking_no,
            "carrier": self.carrier,
            "tracking_link": self.tracking_link,
        }


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_date: date
    customer_name: str
    product_link: str
    price_thb: float
    shipping_thb: float
    rate: float
    customer_rate: float
    rate_profit_lak: float
    price_lak: float
    shipping_lak: float
    service_fee_lak: float
    th_to_la_charge_lak: float
    actual_th_to_la_cost_lak: float
    total_lak: float
    net_profit_lak: float
    payment_status: PaymentStatus
    order_status: str
    tracking_no: str
    carrier: str
    tracking_link: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OrderDeleted(BaseModel):
    deleted: bool = True
