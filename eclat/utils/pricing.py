from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple

CENT = Decimal("0.01")

DEFAULT_TAX_RATE = Decimal("0.10")
DEFAULT_DELIVERY_FEE = Decimal("5.00")


def money(value) -> Decimal:
    # str() first so floats like 0.1 are taken at face value
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def line_subtotal(price, quantity: int) -> Decimal:
    return money(Decimal(str(price)) * quantity)


def summarize(lines: Iterable[Tuple[float, int]], tax_rate=DEFAULT_TAX_RATE) -> Tuple[Decimal, Decimal, Decimal]:
    """(subtotal, tax, total) for (price, quantity) pairs; total excludes delivery."""
    subtotal = sum((line_subtotal(price, qty) for price, qty in lines), Decimal("0.00"))
    tax = money(subtotal * Decimal(str(tax_rate)))
    return subtotal, tax, subtotal + tax


def checkout_totals(lines, tax_rate=DEFAULT_TAX_RATE, delivery_fee=DEFAULT_DELIVERY_FEE) -> dict:
    subtotal, tax, _ = summarize(lines, tax_rate)
    fee = money(delivery_fee)
    return {
        "subtotal": float(subtotal),
        "tax": float(tax),
        "deliveryFee": float(fee),
        "total": float(subtotal + tax + fee),
    }
