import pytest
from fastapi.testclient import TestClient

from orders_api.main import create_app

ALICE = {
    "customer_name": "Alice",
    "product": "Mouse",
    "quantity": 1,
    "amount": 50.00,
    "status": "pending",
    "order_date": "2026-01-01",
}


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}"


@pytest.fixture
def app(database_url):
    return create_app(database_url)


@pytest.fixture
def client(app):
    # entering the client runs startup, which creates the orders table
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_order(client):
    """POST an order built from ALICE plus overrides and return the response body."""

    def _make(**overrides):
        payload = {**ALICE, **overrides}
        r = client.post("/orders", json=payload)
        assert r.status_code == 201, f"unexpected status: {r.status_code}, body: {r.text}"
        return r.json()

    return _make
