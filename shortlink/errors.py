"""Error kinds of the service and the exception that carries them."""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus


class ErrorType(Enum):
    """Outcome kinds, each with a message, a response code and an HTTP status."""

    SUCCESSFUL = 0
    INTERNAL = 1
    NOT_FOUND = 2
    INVALID_REQUEST = 3
    UNAUTHORIZE = 4

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    @property
    def code(self) -> str:
        return _CODES[self]

    @property
    def http_status(self) -> int:
        return _HTTP_STATUSES[self]


_MESSAGES = {
    ErrorType.SUCCESSFUL: "success",
    ErrorType.INTERNAL: "error internal",
    ErrorType.NOT_FOUND: "data not found",
    ErrorType.INVALID_REQUEST: "invalid request",
    ErrorType.UNAUTHORIZE: "unauthorize request",
}

_HTTP_STATUSES = {
    ErrorType.SUCCESSFUL: HTTPStatus.OK.value,
    ErrorType.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR.value,
    ErrorType.NOT_FOUND: HTTPStatus.BAD_REQUEST.value,
    ErrorType.INVALID_REQUEST: HTTPStatus.BAD_REQUEST.value,
    ErrorType.UNAUTHORIZE: HTTPStatus.UNAUTHORIZED.value,
}

_CODES = {
    ErrorType.SUCCESSFUL: "0000",
    ErrorType.INTERNAL: "0001",
    ErrorType.NOT_FOUND: "0002",
    ErrorType.INVALID_REQUEST: "0003",
    ErrorType.UNAUTHORIZE: "0004",
}


class CustomError(Exception):
    """An error the service reports to its clients."""

    def __init__(self, error_type: ErrorType) -> None:
        super().__init__(error_type.message)
        self.error_type = error_type

    @property
    def message(self) -> str:
        return self.error_type.message

    @property
    def code(self) -> str:
        return self.error_type.code

    @property
    def http_status(self) -> int:
        return self.error_type.http_status

    def __str__(self) -> str:
        return self.error_type.message

    def __repr__(self) -> str:
        return f"CustomError({self.error_type!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomError):
            return NotImplemented
        return self.error_type is other.error_type

    def __hash__(self) -> int:
        return hash(self.error_type)