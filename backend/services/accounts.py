# backend/services/accounts.py
# Sign-up and sign-in shared by both account roles
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from utils.errors import AccountNotFound, DuplicateIdentity, InvalidCredentials
from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import Role

logger = logging.getLogger(__name__)


# Emails are stored and compared lowercased
def normalize_email(email: str) -> str:
    return email.strip().lower()


def register(db: Session, role: Role, *, email: str, password: str, first_name: str, last_name: str):
    """Create an account for ``role``.

    Email uniqueness is left to the unique index; a violation is reported as
    DuplicateIdentity.
    """
    normalized_email = normalize_email(email)
    account = role.model(
        email=normalized_email,
        password_hash=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
    )
    db.add(account)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("%s signup rejected for %s: %s", role.name, email, e.orig)
        raise DuplicateIdentity(normalized_email) from e
    db.refresh(account)
    return account


def authenticate(db: Session, role: Role, email: str, password: str):
    """Return the ``role`` account matching the credentials.

    Raises AccountNotFound for an unknown email and InvalidCredentials for a
    wrong password.
    """
    normalized_email = normalize_email(email)
    account = db.query(role.model).filter(func.lower(role.model.email) == normalized_email).first()
    if account is None:
        raise AccountNotFound(email)
    if not verify_password(password, account.password_hash):
        raise InvalidCredentials(email)
    return account
