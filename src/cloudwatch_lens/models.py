"""Pydantic models for CloudWatch Lens records."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from .constants import LAMBDA_LOG_GROUP_PREFIX

T = TypeVar("T")


class AWSRegion(BaseModel):
    """Region entry from the static catalog."""

    code: str = Field(description="Region code, e.g. us-east-1")
    name: str = Field(description="Human readable region name")

    class Config:
        """Pydantic config."""

        frozen = True


class ServiceOption(BaseModel):
    """Service entry from the static catalog."""

    value: str = Field(description="Service identifier")
    name: str = Field(description="Short display name")
    description: str = Field(description="Longer display description")

    class Config:
        """Pydantic config."""

        frozen = True


class AWSCredentials(BaseModel):
    """Static access key pair used to build AWS clients."""

    access_key_id: str = Field(description="AWS access key ID")
    secret_access_key: str = Field(description="AWS secret access key")

    class Config:
        """Pydantic config."""

        frozen = True


class LambdaFunction(BaseModel):
    """Lambda function summary from ListFunctions."""

    name: str = Field(description="Function name")
    runtime: Optional[str] = Field(default=None, description="Runtime identifier")
    last_modified: Optional[str] = Field(default=None, description="ISO modification time")
    description: Optional[str] = Field(default=None, description="Function description")

    class Config:
        """Pydantic config."""

        frozen = True

    @property
    def log_group_name(self) -> str:
        """CloudWatch log group the function writes to."""
        return f"{LAMBDA_LOG_GROUP_PREFIX}{self.name}"


class SqsQueue(BaseModel):
    """SQS queue from ListQueues."""

    url: str = Field(description="Queue URL")

    class Config:
        """Pydantic config."""

        frozen = True

    @property
    def name(self) -> str:
        """Queue name, the last path segment of the URL."""
        return self.url.rstrip("/").rsplit("/", 1)[-1]


class LogStream(BaseModel):
    """Snapshot of a log stream descriptor."""

    name: str = Field(description="Stream name, unique within its log group")
    last_event_time: int = Field(default=0, description="Epoch millis of the newest event")
    first_event_time: int = Field(default=0, description="Epoch millis of the oldest event")
    last_ingestion_time: int = Field(default=0, description="Epoch millis of last ingestion")
    stored_bytes: Optional[int] = Field(default=None, description="Stored size, if reported")

    class Config:
        """Pydantic config."""

        frozen = True


class LogEvent(BaseModel):
    """Single event read from one log stream."""

    timestamp: int = Field(default=0, description="Epoch millis")
    message: str = Field(default="", description="Raw, possibly multi-line, message")
    ingestion_time: Optional[int] = Field(default=None, description="Epoch millis of ingestion")

    class Config:
        """Pydantic config."""

        frozen = True


class MergedLogEvent(LogEvent):
    """Log event tagged with the stream it came from."""

    stream: str = Field(description="Source log stream name")


class Page(BaseModel, Generic[T]):
    """One page of a cursor-paginated listing.

    ``cursor`` is None when the remote reported no continuation.
    """

    items: List[T] = Field(default_factory=list)
    cursor: Optional[str] = None

    class Config:
        """Pydantic config."""

        frozen = True
