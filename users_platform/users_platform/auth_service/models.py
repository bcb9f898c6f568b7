from sqlalchemy import Column, Integer, String
from .db import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    # one-way hash, never the plaintext
    password = Column(String, nullable=False)
    full_name = Column(String, nullable=False)
    # hash of the most recently issued refresh token, overwritten on login/refresh
    hashed_refresh_token = Column(String, nullable=True)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
