from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from rieno.config import Settings
from rieno.errors import InvalidSessionError
from rieno.utils.tokens import ALGORITHM, create_session_token, decode_session_token

settings = Settings(jwt_secret="test-secret")


def test_token_round_trip_carries_id_and_email():
    token = create_session_token("user-1", "a@b.co", settings)
    user = decode_session_token(token, settings)
    assert (user.user_id, user.email) == ("user-1", "a@b.co")


def test_token_expires_after_session_days():
    issued = datetime.now(timezone.utc) - timedelta(days=8)
    token = create_session_token("user-1", "a@b.co", settings, now=issued)
    with pytest.raises(InvalidSessionError):
        decode_session_token(token, settings)


def test_expiry_claim_is_seven_days_out():
    issued = datetime(2024, 1, 1, tzinfo=timezone.utc)
    token = create_session_token("user-1", "a@b.co", settings, now=issued)
    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


def test_token_signed_with_another_secret_is_rejected():
    token = create_session_token("user-1", "a@b.co", Settings(jwt_secret="other"))
    with pytest.raises(InvalidSessionError):
        decode_session_token(token, settings)


def test_token_missing_claims_is_rejected():
    token = jwt.encode({"sub": "x"}, settings.jwt_secret, algorithm=ALGORITHM)
    with pytest.raises(InvalidSessionError):
        decode_session_token(token, settings)


def test_garbage_token_is_rejected():
    with pytest.raises(InvalidSessionError):
        decode_session_token("not-a-token", settings)
