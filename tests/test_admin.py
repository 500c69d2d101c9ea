from eclat.utils.helper import today_iso
from tests.conftest import order_payload, reservation_payload


def test_stats_on_empty_store(client):
    stats = client.get("/api/stats").json()
    assert stats == {
        "totalRevenue": 0.0,
        "totalOrders": 0,
        "totalReservations": 0,
        "pendingOrders": 0,
        "todayOrders": 0,
        "todayReservations": 0,
        "pendingReservations": 0,
        "popularCategory": "None",
        "messages": {"total": 0, "unread": 0},
    }


def test_revenue_excludes_cancelled_orders(client):
    totals = {"subtotal": 100, "tax": 10, "deliveryFee": 5, "total": 115}
    kept = client.post("/api/orders", json=order_payload(totals=totals)).json()["order"]
    dropped = client.post("/api/orders", json=order_payload(totals=totals)).json()["order"]
    client.patch(f"/api/orders/{dropped['id']}/status", json={"status": "cancelled"})
    client.patch(f"/api/orders/{kept['id']}/status", json={"status": "preparing"})
    client.post("/api/orders", json=order_payload(totals={"subtotal": 20, "tax": 2, "deliveryFee": 0, "total": 22}))

    stats = client.get("/api/admin/stats").json()
    assert stats["totalRevenue"] == 137.0
    assert stats["totalOrders"] == 3
    assert stats["pendingOrders"] == 1
    assert stats["todayOrders"] == 3


def test_popular_category_is_quantity_weighted(client):
    drinks = [{"id": 17, "name": "Fresh Lemonade", "price": 6, "quantity": 4}]
    client.post("/api/orders", json=order_payload())  # 2 starters, 1 main
    client.post("/api/orders", json=order_payload(items=drinks))

    assert client.get("/api/stats").json()["popularCategory"] == "drinks"


def test_popular_category_tie_goes_to_first_seen(client):
    items = [
        {"id": 5, "name": "Australian Wagyu Tenderloin", "price": 68, "quantity": 1},
        {"id": 1, "name": "Yellowfin Tuna Tartare", "price": 24, "quantity": 1},
    ]
    client.post("/api/orders", json=order_payload(items=items))
    assert client.get("/api/stats").json()["popularCategory"] == "mains"


def test_reservation_and_message_counts(client):
    client.post("/api/reservations", json=reservation_payload(date=today_iso()))
    other = client.post("/api/reservations", json=reservation_payload()).json()["reservation"]
    client.patch(f"/api/admin/reservations/{other['id']}/status", json={"status": "confirmed"})
    contact = client.post(
        "/api/contacts",
        json={"firstName": "A", "lastName": "B", "email": "a@b.co", "message": "hi"},
    ).json()["contact"]
    client.post("/api/contacts", json={"firstName": "C", "lastName": "D", "email": "c@d.co", "message": "yo"})
    client.patch(f"/api/contacts/{contact['id']}/read")

    stats = client.get("/api/stats").json()
    assert stats["totalReservations"] == 2
    assert stats["todayReservations"] == 1
    assert stats["pendingReservations"] == 1
    assert stats["messages"] == {"total": 2, "unread": 1}


def test_admin_reservation_list_and_status(client):
    reservation = client.post("/api/reservations", json=reservation_payload()).json()["reservation"]

    listed = client.get("/api/admin/reservations", params={"status": "pending"}).json()
    assert [r["id"] for r in listed] == [reservation["id"]]

    resp = client.patch(f"/api/admin/reservations/{reservation['id']}/status", json={"status": "completed"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "completed"
    assert resp.json()["id"] == reservation["id"]

    assert client.patch(f"/api/admin/reservations/{reservation['id']}/status", json={"status": "x"}).status_code == 400


def test_menu_item_lifecycle(client):
    new_item = {"name": "Oysters", "price": 30, "category": "starters", "description": "Half dozen"}
    resp = client.post("/api/admin/menu", json=new_item)
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] > 17
    assert created["badge"] is None
    assert client.get(f"/api/menu/{created['id']}").json()["name"] == "Oysters"

    resp = client.put(f"/api/admin/menu/{created['id']}", json={"price": 32, "badge": "New"})
    assert resp.status_code == 200
    assert resp.json()["price"] == 32
    assert resp.json()["name"] == "Oysters"
    assert resp.json()["badge"] == "New"

    resp = client.put(f"/api/admin/menu/{created['id']}", json={"badge": None})
    assert resp.json()["badge"] is None

    resp = client.delete(f"/api/admin/menu/{created['id']}")
    assert resp.status_code == 204
    assert client.get(f"/api/menu/{created['id']}").status_code == 404
    assert len(client.get("/api/menu").json()) == 17


def test_menu_item_validation_and_missing(client):
    assert client.post("/api/admin/menu", json={"name": "", "price": 1, "category": "mains"}).status_code == 400
    assert client.post("/api/admin/menu", json={"name": "X", "price": -1, "category": "mains"}).status_code == 400
    assert client.post("/api/admin/menu", json={"name": "X", "price": 1, "category": "brunch"}).status_code == 400

    resp = client.put("/api/admin/menu/424242", json={"price": 3})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Item not found"}


def test_consecutive_menu_ids_are_unique(client):
    ids = {
        client.post("/api/admin/menu", json={"name": f"Special {i}", "price": 9, "category": "mains"}).json()["id"]
        for i in range(5)
    }
    assert len(ids) == 5
