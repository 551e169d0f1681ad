# server/models/category.py

from sqlalchemy import Column, String
from . import Base, new_id


class Category(Base):
    """
    A node of the category forest.
    `parent` holds the id of another category, or None for a root. It is not a
    foreign key: deleting a category leaves its children pointing at a missing id.
    """
    __tablename__ = "categories"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    parent = Column(String(32), index=True, nullable=True, default=None)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "parent": self.parent}
