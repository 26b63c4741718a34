from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(
    user_id: UUID,
    company_id: UUID,
    role: str,
    expires_delta: timedelta = timedelta(minutes=15),
) -> str:
    """
    Generate JWT access token

    Args:
        user_id: Profile UUID
        company_id: Company UUID
        role: Primary role (admin, hr, manager, employee)
        expires_delta: Token expiration duration

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "company_id": str(company_id),
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


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
            token, ApplicationConfig.JWT_SECRET, algorithms=[ApplicationConfig.JWT_ALGORITHM]
        )
    except JWTError:
        return None

    if "user_id" not in payload or "company_id" not in payload:
        return None
    return payload
