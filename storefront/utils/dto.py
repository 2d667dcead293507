from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str
    image_url: str
    price: Decimal
    category: str


@dataclass
class CartItemDTO:
    """A cart line. ``id == 0`` marks an item that has not been persisted yet."""

    product_id: int
    product_name: str
    price: Decimal
    quantity: int
    id: int = 0
    user_id: Optional[str] = None
    added_at: datetime = field(default_factory=_utcnow)

    @property
    def is_new(self) -> bool:
        return not self.id


def to_product_dto(row: Any) -> ProductDTO:
    return ProductDTO(
        id=int(getattr(row, "id")),
        name=getattr(row, "name", None) or "",
        description=getattr(row, "description", None) or "",
        image_url=getattr(row, "image_url", None) or "",
        price=_to_decimal(getattr(row, "price", None)),
        category=getattr(row, "category", None) or "",
    )


def to_cart_item_dto(row: Any) -> CartItemDTO:
    return CartItemDTO(
        id=int(getattr(row, "id")),
        user_id=getattr(row, "user_id", None),
        product_id=int(getattr(row, "product_id")),
        product_name=getattr(row, "product_name", None) or "",
        price=_to_decimal(getattr(row, "price", None)),
        quantity=int(getattr(row, "quantity", 0) or 0),
        added_at=getattr(row, "added_at"),
    )
