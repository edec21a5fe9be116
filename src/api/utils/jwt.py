from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig
from src.domain.access import CallerIdentity


def generate_jwt(identity: CallerIdentity) -> str:
    """
    Generate JWT access token

    Args:
        identity: Caller the token vouches for

    Returns:
        JWT token string (HS256, JWT_EXPIRES_MINUTES expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": identity.id,
        "role": identity.role.value,
        "name": identity.name,
        "email": identity.email,
        "apartment_id": identity.apartment_id,
        "exp": now + timedelta(minutes=ApplicationConfig.JWT_EXPIRES_MINUTES),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None


def identity_from_payload(payload: dict) -> Optional[CallerIdentity]:
    """Rebuild the caller identity carried by a decoded token"""
    try:
        return CallerIdentity(
            id=payload["user_id"],
            role=payload["role"],
            name=payload["name"],
            email=payload["email"],
            apartment_id=payload.get("apartment_id"),
        )
    except (KeyError, ValueError):
        return None
