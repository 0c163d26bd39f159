"""Admin capability token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from stance.config import AdminSettings


class AdminTokenPayload(BaseModel):
    """Admin token payload."""

    sub: str
    scope: str
    exp: datetime


class JWTError(Exception):
    """Token is missing, malformed, expired or lacks the admin scope."""

    pass


def create_admin_token(subject: str, settings: AdminSettings) -> str:
    """Sign an admin capability token.

    Args:
        subject: Free-form operator name recorded in the token
        settings: Admin settings

    Returns:
        Encoded JWT
    """
    payload = {
        "sub": subject,
        "scope": settings.token_scope,
        "exp": datetime.now(timezone.utc)
        + timedelta(hours=settings.token_expiry_hours),
    }
    return jwt.encode(
        payload, settings.token_secret, algorithm=settings.token_algorithm
    )


def verify_admin_token(token: str, settings: AdminSettings) -> AdminTokenPayload:
    """Verify signature, expiry and scope of an admin token.

    Raises:
        JWTError: If the token is not a valid admin token
    """
    try:
        payload = jwt.decode(
            token, settings.token_secret, algorithms=[settings.token_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    decoded = AdminTokenPayload(**payload)
    if decoded.scope != settings.token_scope:
        raise JWTError("Token lacks admin scope")
    return decoded
