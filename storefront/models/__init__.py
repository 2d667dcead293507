from .base import Base
from .cart_item import CartItem
from .product import Product

__all__ = ["Base", "CartItem", "Product"]
