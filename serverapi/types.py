"""Enums and type aliases for serverapi."""

from enum import IntEnum, StrEnum


class ErrorCode(StrEnum):
    UNEXPECTED_SERVER_ERROR = "UNEXPECTED_SERVER_ERROR"


class ResponseStatus(IntEnum):
    INTERNAL_SERVER_ERROR = 500
