# server/models/user.py

from sqlalchemy import Column, String
from . import Base, new_id


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    The password is kept as submitted; hashing is out of scope for this service.
    """
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String, index=True)
    email = Column(String, index=True)
    password = Column(String)

    def to_dict(self):
        return {"id": self.id, "username": self.username, "email": self.email}
