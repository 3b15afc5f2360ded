"""Shared FastAPI dependencies.

Settings are read from `app.state` so an app built with `create_app(override)`
talks to the overridden database.
"""

from fastapi import Depends, Request

from app.core.config import Settings
from app.db.dal import Database
from app.services.orders import OrderService
from app.services.rate_service import RateService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(settings: Settings = Depends(get_app_settings)) -> Database:
    return Database(settings.db_path)


def get_rate_service(db: Database = Depends(get_db)) -> RateService:
    return RateService(db)


def get_order_service(
    db: Database = Depends(get_db),
    rate_service: RateService = Depends(get_rate_service),
) -> OrderService:
    return OrderService(db, rate_service)
