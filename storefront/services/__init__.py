from .cart_service import CartService
from .catalog_service import CatalogMode, CatalogService

__all__ = ["CartService", "CatalogMode", "CatalogService"]
