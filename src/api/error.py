from typing import Dict, NoReturn

from fastapi import status

from src.app.errors import ErrorCode
from src.shared.result import Error

STATUS_BY_CODE: Dict[str, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_ASSIGNMENT: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.EXPIRED: status.HTTP_410_GONE,
    ErrorCode.ALREADY_USED: status.HTTP_409_CONFLICT,
    ErrorCode.VALIDATION_ERROR: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> NoReturn:
    """Raise the HTTP exception matching a use-case error code"""
    status_code = STATUS_BY_CODE.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
