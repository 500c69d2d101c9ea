import os
from typing import Any, Dict, List, Optional

import requests

from eclat.client.cart import Cart
from eclat.client.storage import EMAIL_KEY, LocalStorage


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class EclatClient:
    """
    Thin client for the Éclat REST API, used by the website front end and
    the admin console. Polling (dashboard refresh, admin auto-refresh) is
    simply calling the read methods on an interval.

    ``session`` can be any object with a requests-style ``request`` method,
    e.g. a ``requests.Session`` or FastAPI's ``TestClient``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        session=None,
        storage: Optional[LocalStorage] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("ECLAT_API_URL", "http://localhost:3000")).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.storage = storage or LocalStorage()

    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None, json: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        params = {k: v for k, v in (params or {}).items() if v is not None}
        kwargs: Dict[str, Any] = {"params": params}
        if json is not None:
            kwargs["json"] = json
        if isinstance(self.session, requests.Session):
            kwargs["timeout"] = self.timeout

        resp = self.session.request(method, url, **kwargs)
        if resp.status_code >= 400:
            try:
                message = resp.json().get("error", resp.text)
            except ValueError:
                message = resp.text
            raise ApiError(resp.status_code, message)
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # ---------------- MENU ----------------
    def list_menu(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/menu", params={"category": category})

    # ---------------- CHECKOUT ----------------
    def place_order(
        self,
        cart: Cart,
        customer: Dict[str, Any],
        order_type: str = "delivery",
        payment_method: str = "card",
        special_instructions: str = "",
        time: str = "asap",
    ) -> Dict[str, Any]:
        """Submit the cart, then clear it and remember the customer's email."""
        payload = {
            "customer": customer,
            "items": cart.order_lines(),
            "totals": cart.checkout_totals(order_type),
            "orderType": order_type,
            "paymentMethod": payment_method,
            "specialInstructions": special_instructions,
            "time": time,
        }
        result = self._request("POST", "/api/orders", json=payload)
        cart.clear()
        if customer.get("email"):
            self.storage.set_item(EMAIL_KEY, customer["email"])
        return result["order"]

    def get_order(self, order_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/api/orders/{order_id}")

    def list_orders(self, status: Optional[str] = None, order_type: Optional[str] = None) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/orders", params={"status": status, "orderType": order_type})

    def update_order_status(self, order_id: str, status: str) -> Dict[str, Any]:
        return self._request("PATCH", f"/api/orders/{order_id}/status", json={"status": status})["order"]

    def delete_order(self, order_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/orders/{order_id}")["order"]

    # ---------------- RESERVATIONS ----------------
    def book_table(self, contact: Dict[str, Any], adults: int, date: str, time: str, children: int = 0, area: str = "Indoor", comment: str = "") -> Dict[str, Any]:
        payload = {
            "adults": adults,
            "children": children,
            "date": date,
            "time": time,
            "area": area,
            "comment": comment,
            "contact": contact,
        }
        return self._request("POST", "/api/reservations", json=payload)["reservation"]

    def list_reservations(self, status: Optional[str] = None, date: Optional[str] = None) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/reservations", params={"status": status, "date": date})

    def update_reservation_status(self, reservation_id: str, status: str) -> Dict[str, Any]:
        return self._request("PATCH", f"/api/reservations/{reservation_id}/status", json={"status": status})["reservation"]

    # ---------------- CONTACT ----------------
    def send_message(self, first_name: str, last_name: str, email: str, message: str, phone: str = "") -> Dict[str, Any]:
        payload = {"firstName": first_name, "lastName": last_name, "email": email, "phone": phone, "message": message}
        return self._request("POST", "/api/contacts", json=payload)["contact"]

    # ---------------- CUSTOMER ----------------
    def dashboard(self, email: Optional[str] = None) -> Dict[str, Any]:
        """Dashboard for the given email, or for the last email used at checkout."""
        email = email or self.storage.get_item(EMAIL_KEY)
        return self._request("GET", "/api/customer/dashboard", params={"email": email})

    def logout(self) -> None:
        self.storage.remove_item(EMAIL_KEY)

    # ---------------- ADMIN ----------------
    def stats(self) -> Dict[str, Any]:
        return self._request("GET", "/api/stats")

    def create_menu_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/admin/menu", json=item)

    def update_menu_item(self, item_id: int, patch: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/admin/menu/{item_id}", json=patch)

    def delete_menu_item(self, item_id: int) -> None:
        self._request("DELETE", f"/api/admin/menu/{item_id}")
