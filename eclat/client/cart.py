from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from eclat.client.storage import CART_KEY, LocalStorage
from eclat.utils.pricing import DEFAULT_DELIVERY_FEE, DEFAULT_TAX_RATE, checkout_totals, summarize


class Cart:
    """
    Client-held list of menu items with quantities.

    Entries are plain dicts (the menu item's camelCase fields plus
    ``quantity``) so they round-trip through local storage unchanged. The
    cart is written back after every mutation; totals are derived on every
    read.
    """

    def __init__(self, storage: Optional[LocalStorage] = None, tax_rate=DEFAULT_TAX_RATE, delivery_fee=DEFAULT_DELIVERY_FEE):
        self.storage = storage or LocalStorage()
        self.tax_rate = tax_rate
        self.delivery_fee = delivery_fee
        saved = self.storage.get_item(CART_KEY) or []
        self.items: List[Dict[str, Any]] = [dict(entry) for entry in saved if int(entry.get("quantity", 0)) > 0]

    def _find(self, item_id) -> Optional[Dict[str, Any]]:
        for entry in self.items:
            if entry.get("id") == item_id:
                return entry
        return None

    def _save(self) -> None:
        self.storage.set_item(CART_KEY, self.items)

    def add(self, item: Dict[str, Any]) -> None:
        existing = self._find(item["id"])
        if existing is not None:
            existing["quantity"] += 1
        else:
            entry = dict(item)
            entry["quantity"] = 1
            self.items.append(entry)
        self._save()

    def update_quantity(self, item_id, delta: int) -> None:
        # dropping to zero or below removes the entry instead of keeping a 0
        entry = self._find(item_id)
        if entry is None:
            return
        entry["quantity"] += delta
        if entry["quantity"] <= 0:
            self.items.remove(entry)
        self._save()

    def remove(self, item_id) -> None:
        self.items = [entry for entry in self.items if entry.get("id") != item_id]
        self._save()

    def clear(self) -> None:
        self.items = []
        self._save()

    def _lines(self):
        return [(entry["price"], entry["quantity"]) for entry in self.items]

    @property
    def total_items(self) -> int:
        return sum(entry["quantity"] for entry in self.items)

    @property
    def subtotal(self) -> Decimal:
        return summarize(self._lines(), self.tax_rate)[0]

    @property
    def tax(self) -> Decimal:
        return summarize(self._lines(), self.tax_rate)[1]

    @property
    def total(self) -> Decimal:
        """Sidebar total: subtotal + tax, no delivery fee."""
        return summarize(self._lines(), self.tax_rate)[2]

    def checkout_totals(self, order_type: str = "delivery") -> Dict[str, float]:
        fee = self.delivery_fee if order_type == "delivery" else 0
        return checkout_totals(self._lines(), tax_rate=self.tax_rate, delivery_fee=fee)

    def order_lines(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": entry["id"],
                "name": entry.get("name", ""),
                "price": entry["price"],
                "quantity": entry["quantity"],
                "category": entry.get("category"),
            }
            for entry in self.items
        ]
