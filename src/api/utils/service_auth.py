"""
Service API Key Authentication

Validates the shared key used by the account activation service.
"""

import secrets

from fastapi import Header, status

from config import ApplicationConfig
from src.api.error import ClientError
from src.app.errors import ErrorCode
from src.shared.result import Error


async def verify_service_api_key(x_service_api_key: str = Header(None)):
    """
    Verify service API key from X-Service-API-Key header.

    Service-to-service auth, separate from user JWT authentication.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_service_api_key:
        raise ClientError(
            Error(ErrorCode.UNAUTHENTICATED, "Service API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not secrets.compare_digest(x_service_api_key, ApplicationConfig.SERVICE_API_KEY):
        raise ClientError(
            Error(ErrorCode.UNAUTHENTICATED, "Invalid service API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
