# backend/models/admin.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from database import Base
from models.users import new_id


# Represents an instructor account that owns courses
class Admin(Base):
    __tablename__ = "admins"

    id = Column(String(32), primary_key=True, default=new_id)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)

    courses = relationship("Course", back_populates="creator")
