"""
Error codes returned by use cases.

Codes are stable; the API layer maps each to an HTTP status.
"""


class ErrorCode:
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    DUPLICATE_ASSIGNMENT = "DUPLICATE_ASSIGNMENT"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    EXPIRED = "EXPIRED"
    ALREADY_USED = "ALREADY_USED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHENTICATED = "UNAUTHENTICATED"
