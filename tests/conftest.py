"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest
import structlog

from serverapi.exceptions import URLBuilderError
from serverapi.resolver import ContextResolver

BASE_URL = "https://localhost:9443"


@dataclass
class FakeServiceURL:
    path: str

    def get_relative_public_url(self) -> str:
        return self.path

    def get_absolute_public_url(self) -> str:
        return BASE_URL + self.path


@dataclass
class FakeUrlBuilder:
    fail: bool = False
    paths: list[str] = field(default_factory=list)

    def add_path(self, *paths: str) -> FakeUrlBuilder:
        self.paths.extend(paths)
        return self

    def build(self) -> FakeServiceURL:
        if self.fail:
            raise URLBuilderError("proxy context path is not configured")
        return FakeServiceURL("".join(self.paths))


@dataclass
class FakeUrlBuilderFactory:
    fail: bool = False
    created: list[FakeUrlBuilder] = field(default_factory=list)

    def create(self) -> FakeUrlBuilder:
        builder = FakeUrlBuilder(fail=self.fail)
        self.created.append(builder)
        return builder


@dataclass
class StaticTenantConfig:
    enabled: bool = False

    def is_tenant_qualified_urls_enabled(self) -> bool:
        return self.enabled


@pytest.fixture(autouse=True)
def _clear_log_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture()
def url_builder() -> FakeUrlBuilderFactory:
    return FakeUrlBuilderFactory()


@pytest.fixture()
def tenant_config() -> StaticTenantConfig:
    return StaticTenantConfig()


@pytest.fixture()
def resolver(url_builder, tenant_config) -> ContextResolver:
    return ContextResolver(url_builder, tenant_config)


@pytest.fixture()
def make_resolver() -> Callable[..., ContextResolver]:
    """Factory for resolvers with a failing builder or tenant-qualified URLs."""

    def _make(fail: bool = False, qualified: bool = False) -> ContextResolver:
        return ContextResolver(FakeUrlBuilderFactory(fail=fail), StaticTenantConfig(enabled=qualified))

    return _make


@pytest.fixture()
def base_url() -> str:
    return BASE_URL
