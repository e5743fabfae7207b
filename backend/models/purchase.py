# backend/models/purchase.py
from sqlalchemy import Column, String, DateTime, func
from database import Base
from models.users import new_id


# Links a user to a course they bought.
# No unique (user_id, course_id) constraint: repeated purchases are kept as separate rows.
# Neither id carries a foreign key: user_id comes from a verified token whose account is
# not looked up, and course_id may reference a course that no longer exists.
class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), nullable=False, index=True)
    course_id = Column(String(64), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
