from sqlalchemy import Column, Integer, String
from .db import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # unique + index: the store enforces one account per email
    email = Column(String, unique=True, index=True, nullable=False)
    # bcrypt digest, never plaintext
    password = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
