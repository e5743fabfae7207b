# backend/models/course.py
from sqlalchemy import Column, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from models.users import new_id


# A priced, video-linked course owned by exactly one admin.
# image_url holds the externally hosted video URL the client embeds.
class Course(Base):
    __tablename__ = "courses"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String, nullable=False, index=True)
    description = Column(String)
    price = Column(Float)
    image_url = Column(String, nullable=True)

    # Set from the authenticated admin at creation, never from the request body
    creator_id = Column(String(32), ForeignKey("admins.id"), nullable=False, index=True)

    creator = relationship("Admin", back_populates="courses")
