from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.db.dal import Database
from app.models.summary import Summary
from app.services.summary import summarize
from .deps import get_db

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get(
    "/summary",
    response_model=Summary,
    summary="Today / month / payments / lifetime roll-up",
)
async def get_summary(
    as_of: Optional[date] = Query(
        None, alias="date", description="Reference day (YYYY-MM-DD), default today"
    ),
    db: Database = Depends(get_db),
):
    result = await summarize(db, as_of)
    return Summary.model_validate(asdict(result))
