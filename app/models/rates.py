from __future__ import annotations
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class RateSettingsOut(BaseModel):
    """Current THB->LAK base rate; 0 with no timestamp when never configured."""

    exchange_rate: float
    updated_at: Optional[datetime] = None


class RateUpdateIn(BaseModel):
    exchange_rate: float = Field(..., gt=0, description="LAK per 1 THB")
