"""Pydantic models for HTTP request and error payloads."""

from pydantic import BaseModel, ConfigDict, Field


class TextLogRequest(BaseModel):
    """Body of a typed food log request."""

    text: str | None = None


class ApiError(BaseModel):
    """Error payload returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    error: str
    message: str
    status_code: int = Field(alias="statusCode")
