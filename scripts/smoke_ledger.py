"""Smoke script for the order ledger API.

Sequence:
 1. Set the base rate to 1300 LAK per THB.
 2. Create the reference order (customer charged 1350).
 3. Reprice it at the base rate (spread profit drops to 0).
 4. Print today's summary, then delete the order.

Runs against a throwaway database in a temp directory.
"""

from pprint import pprint
from datetime import date
import tempfile
from pathlib import Path

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


def run():
    settings = Settings(data_dir=Path(tempfile.mkdtemp(prefix="ledger-smoke-")))
    settings.init_post_load()
    client = TestClient(create_app(settings))
    output = {}

    output["rate"] = client.put("/api/settings/rate", json={"exchange_rate": 1300}).json()

    order = {
        "order_date": date.today().isoformat(),
        "customer_name": "Smoke Test",
        "price_thb": 100,
        "shipping_thb": 20,
        "customer_rate": 1350,
        "service_fee_lak": 5000,
        "th_to_la_charge_lak": 2000,
        "actual_th_to_la_cost_lak": 3000,
    }
    created = client.post("/api/orders", json=order).json()
    output["created"] = {k: created[k] for k in ("id", "total_lak", "rate_profit_lak", "net_profit_lak")}

    repriced = client.put(
        f"/api/orders/{created['id']}", json={**order, "customer_rate": 1300}
    ).json()
    output["repriced"] = {k: repriced[k] for k in ("total_lak", "rate_profit_lak", "net_profit_lak")}

    output["summary"] = client.get("/api/stats/summary").json()
    output["delete"] = client.delete(f"/api/orders/{created['id']}").json()
    output["delete_again"] = client.delete(f"/api/orders/{created['id']}").status_code

    pprint(output)


if __name__ == "__main__":
    run()
