"""Per-request execution context for tenant and organization scoping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from serverapi.constants import (
    ORGANIZATION_ID_FROM_CONTEXT,
    TENANT_NAME_FROM_CONTEXT,
    USERNAME_FROM_CONTEXT,
)


class RequestContextStore(Protocol):
    """Request-scoped key/value store populated earlier in the request."""

    def get(self, key: str) -> object | None: ...


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Immutable snapshot of the request's identity, passed into each call."""

    tenant_domain: str | None = None
    organization_id: str | None = None
    username: str | None = None

    @classmethod
    def from_store(cls, store: RequestContextStore) -> RequestContext:
        """Snapshot the well-known context keys out of a request-scoped store."""
        return cls(
            tenant_domain=_as_str(store.get(TENANT_NAME_FROM_CONTEXT)),
            organization_id=_as_str(store.get(ORGANIZATION_ID_FROM_CONTEXT)),
            username=_as_str(store.get(USERNAME_FROM_CONTEXT)),
        )


def _as_str(value: object | None) -> str | None:
    return None if value is None else str(value)
