from sqlalchemy import Column, Integer, Numeric, String
from .base import Base


class Product(Base):
    __tablename__ = "Products"

    id = Column("Id", Integer, primary_key=True, autoincrement=False)
    name = Column("Name", String, nullable=False)
    description = Column("Description", String, nullable=False)
    image_url = Column("ImageUrl", String, nullable=False)
    price = Column("Price", Numeric(18, 2), nullable=False)
    category = Column("Category", String, nullable=False)
