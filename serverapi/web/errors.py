"""Render APIError exceptions as structured JSON responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from fastapi.responses import JSONResponse

from serverapi.exceptions import APIError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = structlog.get_logger(__name__)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    logger.warning(
        "api_error_response",
        path=request.url.path,
        status=int(exc.status),
        code=exc.code,
    )
    return JSONResponse(
        status_code=int(exc.status),
        content=exc.response.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the APIError handler on ``app``."""
    app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]
