import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional

from social_posts.core.config import get_settings


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Sign an access token whose subject is the user id."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"sub": str(user_id), "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """
    Verify the token signature and expiry and return its payload.

    Raises:
        jwt.ExpiredSignatureError: The token is past its ``exp``
        jwt.InvalidTokenError: Any other verification failure
    """
    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
