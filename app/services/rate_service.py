"""Base exchange rate provider.

The ledger keeps a single "current" THB->LAK rate in the settings row. Pricing
and summaries read it through this service and receive it as a plain value,
so neither engine holds the rate as ambient state.

- `get_base_rate()` returns LAK per 1 THB, or 0.0 when no row exists yet.
- `get_snapshot()` adds the last-updated timestamp for summary consumers.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import logging

from app.db.dal import Database
from .money import to_amount

logger = logging.getLogger("app.rates")


@dataclass(frozen=True)
class RateSnapshot:
    rate: float
    updated_at: Optional[datetime]


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class RateService:
    def __init__(self, db: Database):
        self._db = db

    def get_snapshot(self) -> RateSnapshot:
        row = self._db.get_rate_settings()
        if row is None:
            return RateSnapshot(rate=0.0, updated_at=None)
        return RateSnapshot(
            rate=to_amount(row["exchange_rate"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )

    def get_base_rate(self) -> float:
        return self.get_snapshot().rate

    def set_rate(self, rate: float) -> RateSnapshot:
        if rate <= 0:
            raise ValueError("exchange_rate must be positive")
        previous = self.get_base_rate()
        self._db.set_exchange_rate(rate)
        logger.info(
            "base rate changed", extra={"previous_rate": previous, "new_rate": rate}
        )
        return self.get_snapshot()
