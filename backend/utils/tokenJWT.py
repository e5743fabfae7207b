# utils/tokenJWT.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Type
import logging

from jose import jwt, JWTError
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from config import settings
from database import Base
from models.admin import Admin
from models.users import User
from utils.errors import InvalidToken

logger = logging.getLogger(__name__)

# The client sends the raw token in the Authorization header, no scheme prefix
token_header = APIKeyHeader(name="Authorization", auto_error=False)


# Describes one account role: how its tokens are signed and where its accounts live
@dataclass(frozen=True)
class Role:
    name: str
    secret: str
    model: Type[Base]


USER = Role(name="user", secret=settings.JWT_USER_SECRET, model=User)
ADMIN = Role(name="admin", secret=settings.JWT_ADMIN_SECRET, model=Admin)


# Sign a token carrying only the principal id; the role is implied by the secret
def create_access_token(principal_id: str, role: Role, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = {"id": principal_id}
    if expires_delta is None and settings.ACCESS_TOKEN_EXPIRE_MINUTES:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    if expires_delta is not None:
        to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, role.secret, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, role: Role) -> str:
    try:
        payload = jwt.decode(token, role.secret, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    principal_id = payload.get("id")
    if not principal_id:
        raise InvalidToken("Token carries no principal id")
    return str(principal_id)


def _strip_scheme(raw: str) -> str:
    # Tolerate "Bearer <token>" although the client sends the bare token
    scheme, _, rest = raw.partition(" ")
    if rest and scheme.lower() == "bearer":
        return rest.strip()
    return raw.strip()


# Dependency factory: resolves the authenticated principal id for the given role.
# The principal is not looked up in the database, a verified signature is enough.
def principal_required(role: Role) -> Callable[..., str]:
    def _checker(authorization: Optional[str] = Depends(token_header)) -> str:
        credentials_exception = HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
        if not authorization:
            raise credentials_exception
        try:
            return decode_access_token(_strip_scheme(authorization), role)
        except InvalidToken as e:
            logger.info("Rejected %s token: %s", role.name, e)
            raise credentials_exception

    return _checker


current_user_id = principal_required(USER)
current_admin_id = principal_required(ADMIN)
