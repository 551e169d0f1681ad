# server/models/product.py

from sqlalchemy import Column, Float, String
from . import Base, new_id


class Product(Base):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    category = Column(String(32), index=True, nullable=False)
    price = Column(Float, nullable=False)
    img = Column(String, default="")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "img": self.img or "",
        }
