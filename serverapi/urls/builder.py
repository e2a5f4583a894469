"""Interfaces for the service URL builder and tenant qualification config.

The builder itself is provided by the hosting deployment. It owns the
proxy context path, hostname and, in tenant-qualified mode, injects the
``/t/{tenant}`` segment on its own.
"""

from __future__ import annotations

from typing import Protocol


class ServiceURL(Protocol):
    def get_relative_public_url(self) -> str: ...

    def get_absolute_public_url(self) -> str: ...


class UrlBuilder(Protocol):
    def add_path(self, *paths: str) -> UrlBuilder: ...

    def build(self) -> ServiceURL:
        """Build the service URL.

        Raises:
            URLBuilderError: If the URL cannot be built from the current
                deployment configuration.
        """
        ...


class UrlBuilderFactory(Protocol):
    def create(self) -> UrlBuilder: ...


class TenantQualificationConfig(Protocol):
    def is_tenant_qualified_urls_enabled(self) -> bool: ...
