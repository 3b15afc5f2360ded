from __future__ import annotations

from fastapi import APIRouter, Depends

from app.models.rates import RateSettingsOut, RateUpdateIn
from app.services.rate_service import RateService
from .deps import get_rate_service

"""Base exchange rate endpoints.

    - GET /api/settings/rate  -> current THB->LAK rate and when it changed
    - PUT /api/settings/rate  -> set a new rate (applies to orders created or
      updated afterwards; stored orders keep their snapshot until edited)
"""

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("/rate", response_model=RateSettingsOut, summary="Current base rate")
def get_rate(svc: RateService = Depends(get_rate_service)):
    snapshot = svc.get_snapshot()
    return RateSettingsOut(exchange_rate=snapshot.rate, updated_at=snapshot.updated_at)


@router.put("/rate", response_model=RateSettingsOut, summary="Set the base rate")
def set_rate(payload: RateUpdateIn, svc: RateService = Depends(get_rate_service)):
    snapshot = svc.set_rate(payload.exchange_rate)
    return RateSettingsOut(exchange_rate=snapshot.rate, updated_at=snapshot.updated_at)
