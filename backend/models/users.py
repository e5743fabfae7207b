# backend/models/users.py
import uuid

from sqlalchemy import Column, String
from database import Base


def new_id() -> str:
    return uuid.uuid4().hex


# Represents a student account that can purchase courses
class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
