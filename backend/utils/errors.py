# backend/utils/errors.py
# Domain errors raised by the service layer; routes translate them into HTTP responses.


class InvalidToken(Exception):
    """Token is malformed, unsigned, expired or signed with another role's secret."""


class DuplicateIdentity(Exception):
    """An account with this email already exists."""


class AccountNotFound(Exception):
    pass


class InvalidCredentials(Exception):
    pass
