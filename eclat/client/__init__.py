from .api_client import ApiError, EclatClient
from .cart import Cart
from .storage import CART_KEY, EMAIL_KEY, LocalStorage

__all__ = ["ApiError", "EclatClient", "Cart", "LocalStorage", "CART_KEY", "EMAIL_KEY"]
