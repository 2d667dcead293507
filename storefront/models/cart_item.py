from sqlalchemy import Column, DateTime, Integer, Numeric, String
from .base import Base


class CartItem(Base):
    __tablename__ = "CartItems"

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    # owner: user id, or the session id for anonymous carts
    user_id = Column("UserId", String, nullable=True)
    product_id = Column("ProductId", Integer, nullable=False)
    product_name = Column("ProductName", String, nullable=False)
    price = Column("Price", Numeric(18, 2), nullable=False)
    quantity = Column("Quantity", Integer, nullable=False)
    added_at = Column("AddedAt", DateTime, nullable=False)
