"""Storefront data access: product catalog reader and cart store."""

from .config import AppConfig, ConfigurationError, load_env
from .services.cart_service import CartService
from .services.catalog_service import CatalogMode, CatalogService
from .utils.dto import CartItemDTO, ProductDTO

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "load_env",
    "CartService",
    "CatalogMode",
    "CatalogService",
    "CartItemDTO",
    "ProductDTO",
]
