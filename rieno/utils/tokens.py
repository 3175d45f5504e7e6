from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from rieno.errors import InvalidSessionError
from rieno.utils.logging_utils import get_logger

ALGORITHM = "HS256"

logger = get_logger("tokens")


@dataclass
class SessionUser:
    user_id: str
    email: str


def create_session_token(user_id: str, email: str, settings, now: datetime = None) -> str:
    now = now or datetime.now(timezone.utc)
    claims = {
        "userId": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=settings.session_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=ALGORITHM)


def decode_session_token(token: str, settings) -> SessionUser:
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning(f"Token verification error: {e}")
        raise InvalidSessionError()

    user_id = payload.get("userId")
    email = payload.get("email")
    if not user_id or not email:
        raise InvalidSessionError()
    return SessionUser(user_id=user_id, email=email)


def set_session_cookie(response, token: str, settings):
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=settings.session_days * 24 * 60 * 60,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


def clear_session_cookie(response, settings):
    response.delete_cookie(
        key=settings.cookie_name,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
