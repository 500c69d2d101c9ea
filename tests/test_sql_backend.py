import pytest
from fastapi.testclient import TestClient
from sqlalchemy import BigInteger

from eclat.crud.base import SQLRepository
from eclat.crud.stores import build_stores
from eclat.main import create_app
from eclat.model import MenuItemRecord
from eclat.schemas.menu_schema import MenuItem
from tests.conftest import make_settings, order_payload, reservation_payload


@pytest.fixture
def sql_client():
    app = create_app(make_settings(STORE_BACKEND="sql", DATABASE_URL="sqlite://"))
    with TestClient(app) as c:
        yield c


def test_sql_stores_are_selected():
    stores = build_stores(make_settings(STORE_BACKEND="sql", DATABASE_URL="sqlite://"))
    assert isinstance(stores.orders, SQLRepository)
    assert stores.menu.count() == 17
    # seeding is skipped once the menu has items
    from eclat.crud.menu_crud import seed_menu

    assert seed_menu(stores) == 0


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        build_stores(make_settings(STORE_BACKEND="redis"))


def test_order_round_trip(sql_client):
    created = sql_client.post("/api/orders", json=order_payload()).json()["order"]
    fetched = sql_client.get(f"/api/orders/{created['id']}").json()
    assert fetched == created
    assert fetched["customer"]["email"] == "jane@example.com"
    assert fetched["items"][0]["category"] == "starters"


def test_filters_and_updates_run_against_sql(sql_client):
    first = sql_client.post("/api/orders", json=order_payload()).json()["order"]
    sql_client.post("/api/orders", json=order_payload(orderType="pickup"))

    resp = sql_client.patch(f"/api/orders/{first['id']}/status", json={"status": "preparing"})
    assert resp.json()["order"]["status"] == "preparing"

    assert [o["id"] for o in sql_client.get("/api/orders", params={"status": "preparing"}).json()] == [first["id"]]
    assert len(sql_client.get("/api/orders", params={"orderType": "pickup"}).json()) == 1

    assert sql_client.delete(f"/api/orders/{first['id']}").status_code == 200
    assert len(sql_client.get("/api/orders").json()) == 1
    assert sql_client.delete(f"/api/orders/{first['id']}").status_code == 404


def test_reservation_date_filter_and_dashboard(sql_client):
    sql_client.post("/api/reservations", json=reservation_payload(date="2099-05-05"))
    sql_client.post("/api/reservations", json=reservation_payload(date="2099-06-06", email="other@example.com"))
    sql_client.post("/api/orders", json=order_payload(totals={"subtotal": 100, "tax": 0, "deliveryFee": 0, "total": 100}))

    assert len(sql_client.get("/api/reservations", params={"date": "2099-05-05"}).json()) == 1
    body = sql_client.get("/api/customer/dashboard", params={"email": "jane@example.com"}).json()
    assert body["stats"]["loyaltyPoints"] == 1000
    assert body["user"]["membershipTier"] == "Silver"
    assert body["stats"]["upcomingReservations"] == 1


def test_menu_crud_against_sql(sql_client):
    desserts = sql_client.get("/api/menu", params={"category": "desserts"}).json()
    assert len(desserts) == 4

    created = sql_client.post("/api/admin/menu", json={"name": "Pavlova", "price": 13, "category": "desserts"}).json()
    sql_client.put(f"/api/admin/menu/{created['id']}", json={"badge": "New"})
    assert sql_client.get(f"/api/menu/{created['id']}").json()["badge"] == "New"
    assert sql_client.delete(f"/api/admin/menu/{created['id']}").status_code == 204
    assert sql_client.get(f"/api/menu/{created['id']}").status_code == 404


def test_menu_ids_are_stored_as_64_bit_integers():
    assert isinstance(MenuItemRecord.__table__.c.id.type, BigInteger)

    stores = build_stores(make_settings(STORE_BACKEND="sql", DATABASE_URL="sqlite://", SEED_MENU=False))
    item = MenuItem(id=2**31 + 5, name="Tasting Menu", price=120, category="mains")
    stores.menu.add(item)
    assert stores.menu.get(2**31 + 5).name == "Tasting Menu"
