"""Static catalog used when no database is configured."""

from decimal import Decimal
from typing import List

from ..utils.dto import ProductDTO


_BOOTS = "images/products/boots"
_CLIMBING = "images/products/climbing gear"

_SAMPLE_ROWS = [
    (1, f"{_BOOTS}/shutterstock_66842440.jpg", "9.99", "Clothing"),
    (2, f"{_BOOTS}/shutterstock_475046062.jpg", "19.99", "Clothing"),
    (3, f"{_BOOTS}/shutterstock_1121278055.jpg", "29.99", "Clothing"),
    (4, f"{_BOOTS}/shutterstock_66842440.jpg", "39.99", "Footwear"),
    (5, f"{_BOOTS}/shutterstock_222721876.jpg", "49.99", "Footwear"),
    (6, f"{_BOOTS}/shutterstock_475046062.jpg", "59.99", "Footwear"),
    (7, f"{_CLIMBING}/shutterstock_6170527.jpg", "69.99", "Equipment"),
    (8, f"{_CLIMBING}/shutterstock_48040747.jpg", "79.99", "Equipment"),
    (9, f"{_CLIMBING}/shutterstock_64998481.jpg", "89.99", "Equipment"),
]


def sample_products() -> List[ProductDTO]:
    return [
        ProductDTO(
            id=pid,
            name=f"Sample Product {pid}",
            description=f"Sample Product Description {pid}",
            image_url=image_url,
            price=Decimal(price),
            category=category,
        )
        for pid, image_url, price, category in _SAMPLE_ROWS
    ]
