"""Exception hierarchy for serverapi."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from serverapi.models.api import ErrorResponse
    from serverapi.types import ResponseStatus


class ServerApiError(Exception):
    """Base exception for all serverapi errors."""


class ConfigError(ServerApiError):
    """Raised when configuration is invalid."""


class URLBuilderError(ServerApiError):
    """Raised by URL builders when a service URL cannot be built."""


class APIError(ServerApiError):
    """An error that maps directly onto an HTTP error response."""

    def __init__(self, status: ResponseStatus, response: ErrorResponse) -> None:
        super().__init__(response.description or response.message)
        self.status = status
        self.response = response

    @property
    def code(self) -> str:
        return self.response.code

    @property
    def description(self) -> str:
        return self.response.description


class InternalBuildFailure(APIError):
    """Raised when a response URI could not be built."""
