from datetime import timedelta

import pytest
from jose import jwt

from utils.errors import InvalidToken
from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import ADMIN, USER, create_access_token, decode_access_token


def test_password_hash_is_salted_and_verifiable():
    first = get_password_hash("secret1")
    second = get_password_hash("secret1")

    assert first != "secret1"
    assert first != second
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)
    assert not verify_password("secret2", first)


def test_token_round_trip_for_its_role():
    token = create_access_token("abc123", USER)
    assert decode_access_token(token, USER) == "abc123"


def test_token_carries_only_the_principal_id():
    token = create_access_token("abc123", ADMIN)
    claims = jwt.get_unverified_claims(token)
    assert claims == {"id": "abc123"}


@pytest.mark.parametrize("issued_for,checked_as", [(USER, ADMIN), (ADMIN, USER)])
def test_token_rejected_by_the_other_role(issued_for, checked_as):
    token = create_access_token("abc123", issued_for)
    with pytest.raises(InvalidToken):
        decode_access_token(token, checked_as)


def test_malformed_token_rejected():
    with pytest.raises(InvalidToken):
        decode_access_token("not-a-token", USER)


def test_token_without_id_rejected():
    token = jwt.encode({"sub": "abc123"}, USER.secret, algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_access_token(token, USER)


def test_expired_token_rejected():
    token = create_access_token("abc123", USER, expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidToken):
        decode_access_token(token, USER)


def test_role_secrets_are_distinct():
    assert USER.secret != ADMIN.secret
