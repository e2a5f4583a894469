"""Resolve request context and build canonical response URIs."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import structlog

from serverapi.constants import (
    ERROR_BUILDING_RESPONSE_MESSAGE,
    ORGANIZATION_CONTEXT_PATH_COMPONENT,
    SERVER_API_PATH_COMPONENT,
    SUPER_TENANT_DOMAIN_NAME,
    TENANT_CONTEXT_PATH_COMPONENT,
)
from serverapi.exceptions import InternalBuildFailure, URLBuilderError
from serverapi.models.api import ErrorResponse
from serverapi.types import ErrorCode, ResponseStatus

if TYPE_CHECKING:
    from serverapi.context.request_context import RequestContext
    from serverapi.urls.builder import TenantQualificationConfig, UrlBuilderFactory

logger = structlog.get_logger(__name__)

BODY_URL_ERROR = "Server encountered an error while building URL for response body."
HEADER_URL_ERROR = "Server encountered an error while building URL for response header."

# Characters str.isspace() accepts that Java's Character.isWhitespace does not.
_NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f\u0085")


def _is_blank(value: str | None) -> bool:
    """True for None, empty, or only breaking whitespace (StringUtils.isBlank)."""
    if not value:
        return True
    return all(c.isspace() and c not in _NON_BREAKING_SPACES for c in value)


class ContextResolver:
    """Derives tenant/organization scoped API URIs from a request context.

    Holds no per-request state; the context is passed into every call so one
    resolver can be shared across concurrent requests.
    """

    def __init__(self, url_builder: UrlBuilderFactory, config: TenantQualificationConfig) -> None:
        self._url_builder = url_builder
        self._config = config

    def get_tenant_domain(self, ctx: RequestContext) -> str:
        """Return the request's tenant domain, or the super tenant if none is set."""
        if ctx.tenant_domain is None:
            return SUPER_TENANT_DOMAIN_NAME
        return ctx.tenant_domain

    def get_username(self, ctx: RequestContext) -> str | None:
        return ctx.username

    def get_organization_id(self, ctx: RequestContext) -> str | None:
        return ctx.organization_id

    def build_relative_uri(self, ctx: RequestContext, endpoint: str) -> str:
        """Build the URI for a response body, including the proxy context path.

        Ex: /t/<tenant-domain>/api/server/<endpoint> or /o/<org-id>/api/server/<endpoint>
        The builder's string is returned as is, without URI validation.
        """
        path = self.build_path_context(ctx, endpoint)
        try:
            return self._url_builder.create().add_path(path).build().get_relative_public_url()
        except URLBuilderError as e:
            raise self._internal_build_failure(e, BODY_URL_ERROR) from e

    def build_absolute_uri(self, ctx: RequestContext, endpoint: str) -> str:
        """Build the fully qualified URI for a response header such as Location.

        Ex: https://localhost:9443/t/<tenant-domain>/api/server/<endpoint>
        The builder's string is returned as is, without URI validation.
        """
        path = self.build_path_context(ctx, endpoint)
        try:
            return self._url_builder.create().add_path(path).build().get_absolute_public_url()
        except URLBuilderError as e:
            raise self._internal_build_failure(e, HEADER_URL_ERROR) from e

    def build_path_context(self, ctx: RequestContext, endpoint: str) -> str:
        """Prefix ``endpoint`` with the organization or tenant API context.

        An organization id always wins. Otherwise in tenant-qualified mode the
        URL builder adds the tenant segment itself, so only the server API
        component is prepended here.
        """
        organization_id = self.get_organization_id(ctx)
        if not _is_blank(organization_id):
            prefix = ORGANIZATION_CONTEXT_PATH_COMPONENT.format(organization_id)
        elif self._config.is_tenant_qualified_urls_enabled():
            prefix = ""
        else:
            prefix = TENANT_CONTEXT_PATH_COMPONENT.format(self.get_tenant_domain(ctx))
        return prefix + SERVER_API_PATH_COMPONENT + endpoint

    def _internal_build_failure(self, cause: Exception, description: str) -> InternalBuildFailure:
        ref = structlog.contextvars.get_contextvars().get("request_id") or str(uuid.uuid4())
        logger.error(
            "response_url_build_failed",
            description=description,
            ref=ref,
            error=str(cause),
            exc_info=cause,
        )
        response = ErrorResponse(
            code=ErrorCode.UNEXPECTED_SERVER_ERROR,
            message=ERROR_BUILDING_RESPONSE_MESSAGE,
            description=description,
            ref=ref,
        )
        return InternalBuildFailure(ResponseStatus.INTERNAL_SERVER_ERROR, response)
