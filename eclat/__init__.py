"""Éclat Bistro website backend: menu, orders, reservations and loyalty."""

__version__ = "1.0.0"
