"""
Result type used as the return contract of every use case.

A use case returns either ``Return.ok(value)`` or ``Return.err(Error(...))``;
the API layer decides how an error code is rendered.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Error:
    """Business error with a stable code and a human-readable message"""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.code == other.code and self.message == other.message


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self._value = value
        self._error = error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Result holds an error: {self._error.code}")
        return self._value

    @property
    def error(self) -> Optional[Error]:
        return self._error


class Return:
    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
