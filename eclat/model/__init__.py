from .menu import MenuItemRecord
from .order import OrderRecord
from .reservation import ReservationRecord
from .contact import ContactRecord

__all__ = ["MenuItemRecord", "OrderRecord", "ReservationRecord", "ContactRecord"]
