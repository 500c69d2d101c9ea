import pytest
from fastapi.testclient import TestClient

from eclat.main import create_app
from eclat.utils.config import Settings


def make_settings(**overrides):
    values = dict(
        STORE_BACKEND="memory",
        SEED_MENU=True,
        TAX_RATE=0.10,
        DELIVERY_FEE=5.00,
        ENFORCE_STATUS_TRANSITIONS=False,
        LOG_LEVEL="WARNING",
        ALLOWED_ORIGINS=["*"],
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def stores(app):
    return app.state.stores


def order_payload(email="jane@example.com", items=None, totals=None, **extra):
    payload = {
        "customer": {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": email,
            "phone": "555-0100",
            "address": "1 Rue de Rivoli",
        },
        "items": items if items is not None else [
            {"id": 1, "name": "Yellowfin Tuna Tartare", "price": 24, "quantity": 2},
            {"id": 5, "name": "Australian Wagyu Tenderloin", "price": 68, "quantity": 1},
        ],
        "orderType": "delivery",
        "paymentMethod": "card",
        "specialInstructions": "Ring twice",
        "time": "19:30",
    }
    if totals is not None:
        payload["totals"] = totals
    payload.update(extra)
    return payload


def reservation_payload(email="jane@example.com", date="2099-01-15", **extra):
    payload = {
        "adults": 2,
        "children": 1,
        "date": date,
        "time": "19:00",
        "area": "Terrace",
        "comment": "Anniversary",
        "contact": {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": email,
            "phone": "555-0100",
        },
    }
    payload.update(extra)
    return payload
