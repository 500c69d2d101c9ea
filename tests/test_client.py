import pytest

from eclat.client import CART_KEY, EMAIL_KEY, ApiError, Cart, EclatClient, LocalStorage

CUSTOMER = {
    "firstName": "Jane",
    "lastName": "Doe",
    "email": "jane@example.com",
    "phone": "555-0100",
    "address": "1 Rue de Rivoli",
}


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "local.json"))


@pytest.fixture
def api(client, storage):
    return EclatClient(base_url="http://testserver", session=client, storage=storage)


def test_browse_menu(api):
    assert len(api.list_menu()) == 17
    assert {item["category"] for item in api.list_menu("drinks")} == {"drinks"}


def test_checkout_clears_cart_and_remembers_email(api, storage):
    cart = Cart(storage)
    for item in api.list_menu("starters")[:2]:
        cart.add(item)
    cart.add(api.list_menu("mains")[0])

    order = api.place_order(cart, CUSTOMER, order_type="pickup", time="20:00")

    assert order["status"] == "pending"
    assert order["totals"]["deliveryFee"] == 0.0
    assert order["totals"]["subtotal"] == 24 + 22 + 68
    assert cart.items == []
    assert storage.get_item(CART_KEY) == []
    assert storage.get_item(EMAIL_KEY) == "jane@example.com"
    assert api.get_order(order["id"])["preferredTime"] == "20:00"


def test_failed_checkout_keeps_cart(api, storage):
    cart = Cart(storage)
    cart.add(api.list_menu()[0])

    with pytest.raises(ApiError) as excinfo:
        api.place_order(cart, {"firstName": "Jane"})

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Missing required customer information"
    assert len(cart.items) == 1
    assert storage.get_item(EMAIL_KEY) is None


def test_dashboard_uses_stored_email_until_logout(api):
    cart = Cart(api.storage)
    cart.add(api.list_menu()[0])
    api.place_order(cart, CUSTOMER)

    assert api.dashboard()["user"]["email"] == "jane@example.com"
    api.logout()
    assert api.dashboard()["user"]["firstName"] == "Guest"


def test_order_and_reservation_management(api):
    cart = Cart(api.storage)
    cart.add(api.list_menu()[0])
    order = api.place_order(cart, CUSTOMER)

    assert api.update_order_status(order["id"], "preparing")["status"] == "preparing"
    assert [o["id"] for o in api.list_orders(status="preparing")] == [order["id"]]
    assert api.delete_order(order["id"])["id"] == order["id"]
    with pytest.raises(ApiError) as excinfo:
        api.get_order(order["id"])
    assert excinfo.value.status_code == 404

    contact = {k: CUSTOMER[k] for k in ("firstName", "lastName", "email", "phone")}
    reservation = api.book_table(contact, adults=4, date="2099-07-14", time="20:30", area="Terrace")
    assert reservation["details"]["adults"] == 4
    assert api.update_reservation_status(reservation["id"], "confirmed")["status"] == "confirmed"
    assert len(api.list_reservations(date="2099-07-14")) == 1


def test_message_and_admin_calls(api):
    sent = api.send_message("Jane", "Doe", "jane@example.com", "Hello")
    assert sent["status"] == "new"
    assert api.stats()["messages"] == {"total": 1, "unread": 1}

    item = api.create_menu_item({"name": "Gazpacho", "price": 11, "category": "starters"})
    assert api.update_menu_item(item["id"], {"price": 12})["price"] == 12
    assert api.delete_menu_item(item["id"]) is None
    assert len(api.list_menu()) == 17


def test_local_storage_tolerates_corrupt_file(tmp_path):
    path = tmp_path / "local.json"
    path.write_text("{not json", encoding="utf-8")
    store = LocalStorage(str(path))
    assert store.get_item(CART_KEY) is None

    store.set_item(EMAIL_KEY, "a@b.co")
    assert LocalStorage(str(path)).get_item(EMAIL_KEY) == "a@b.co"
    store.remove_item(EMAIL_KEY)
    assert LocalStorage(str(path)).get_item(EMAIL_KEY) is None
