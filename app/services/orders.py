"""Order lifecycle: create, read, list, replace, delete.

Create and update both price the order against the base rate in effect at
that moment. An update therefore discards the rate captured at creation and
recomputes every derived figure from the new inputs.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from app.core.errors import OrderNotFound, StorageError
from app.db.dal import Database
from app.models.order import OrderIn
from app.services.pricing import build_order_record, price
from app.services.rate_service import RateService

logger = logging.getLogger("app.orders")


class OrderService:
    def __init__(self, db: Database, rate_service: Optional[RateService] = None):
        self._db = db
        self._rates = rate_service or RateService(db)

    def _priced_record(self, order: OrderIn) -> Dict[str, Any]:
        base_rate = self._rates.get_base_rate()
        return build_order_record(order, price(order, base_rate))

    def create(self, order: OrderIn) -> Dict[str, Any]:
        record = self._priced_record(order)
        order_id = self._db.insert_order(record)
        logger.info(
            "order created",
            extra={"order_id": order_id, "rate": record["rate"], "total_lak": record["total_lak"]},
        )
        row = self._db.get_order(order_id)
        if row is None:
            raise StorageError(f"order {order_id} missing after insert")
        return row

    def get(self, order_id: int) -> Dict[str, Any]:
        row = self._db.get_order(order_id)
        if row is None:
            raise OrderNotFound(order_id)
        return row

    def list_recent(self, limit: int) -> List[Dict[str, Any]]:
        return self._db.list_recent_orders(limit)

    def update(self, order_id: int, order: OrderIn) -> Dict[str, Any]:
        record = self._priced_record(order)
        if not self._db.update_order(order_id, record):
            raise OrderNotFound(order_id)
        logger.info(
            "order repriced",
            extra={"order_id": order_id, "rate": record["rate"], "total_lak": record["total_lak"]},
        )
        return self.get(order_id)

    def delete(self, order_id: int) -> None:
        if not self._db.delete_order(order_id):
            raise OrderNotFound(order_id)
        logger.info("order deleted", extra={"order_id": order_id})
