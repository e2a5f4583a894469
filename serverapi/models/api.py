"""API response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    code: str
    message: str
    description: str = ""
    ref: str | None = Field(default=None, alias="traceId")
