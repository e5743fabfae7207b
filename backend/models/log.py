from sqlalchemy import Column, Integer, String, DateTime, JSON, func
from database import Base

# Audit trail of account and course events.
# principal_id is not a foreign key because it may point at either users or admins.
class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)

    # Event timestamp and core action details
    ts = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    principal_id = Column(String(32), nullable=True, index=True)
    role = Column(String(20), nullable=True)
    action = Column(String(50), index=True)
    resource = Column(String(50), index=True)
    status = Column(String(20), index=True)
    ip = Column(String(64), nullable=True)

    # JSON container for flexible context data
    meta = Column(JSON, nullable=True)
