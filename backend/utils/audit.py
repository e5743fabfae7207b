from typing import Optional

from fastapi import Request
from sqlalchemy.orm import Session
from models.log import AuditLog

def write_log(db: Session, *, principal_id, role, action, resource, status="SUCCESS", ip=None, meta=None):
    entry = AuditLog(principal_id=principal_id, role=role, action=action, resource=resource,
                     status=status, ip=ip, meta=meta or {})
    db.add(entry)
    db.commit()

def client_ip(request: Optional[Request]) -> Optional[str]:
    if request is None or request.client is None:
        return None
    return request.client.host
