"""Event data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BaseEvent(BaseModel):
    """Base class for all events."""

    model_config = ConfigDict(frozen=True)

    event_type: str = Field(default="base", description="Event type identifier")
    occurred_at: datetime = Field(default_factory=datetime.now)


class RequestRetryEvent(BaseEvent):
    """Emitted when a failed request is about to be re-issued."""

    event_type: str = Field(default="request.retry")
    method: str = Field(description="HTTP method of the request")
    url: str = Field(description="URL of the request")
    attempt: int = Field(ge=1, description="Retry number (1-indexed)")
    max_retries: int = Field(ge=1, description="Maximum retries allowed")
    error_message: str = Field(default="", description="Error that triggered retry")
    error_code: str | None = Field(default=None, description="Error code, if known")
