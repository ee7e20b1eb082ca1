"""Job input, state record and listing models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from chunkproc.core.exceptions import InputValidationError
from chunkproc.core.keys import build_partition_key, extract_execution_id
from chunkproc.core.types import RecordKind

_REQUIRED_FIELDS = ("owner", "sfnExecutionId", "bucketName", "keyPrefix", "activityLogsTable")


def utc_timestamp() -> str:
    """ISO-8601 timestamp with microseconds, used as the record sort key."""
    return datetime.now(timezone.utc).isoformat()


class JobInput(BaseModel):
    """Validated invocation event identifying one chunked listing job."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    owner: str
    execution_id: str = Field(alias="sfnExecutionId")
    bucket: str = Field(alias="bucketName")
    prefix: str = Field(alias="keyPrefix")
    table: str = Field(alias="activityLogsTable")

    @field_validator("execution_id", mode="after")
    @classmethod
    def _parse_execution_id(cls, value: str) -> str:
        try:
            return extract_execution_id(value)
        except InputValidationError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def partition_key(self) -> str:
        return build_partition_key(self.owner, self.execution_id)

    @classmethod
    def from_event(cls, event: dict[str, Any] | None) -> JobInput:
        """Validate a raw invocation event.

        Every required field is checked before anything else happens; all
        problems are reported together in a single InputValidationError.
        """
        if not isinstance(event, dict):
            raise InputValidationError([], f"Event must be a mapping, got {type(event).__name__}")

        missing = [
            alias for alias in _REQUIRED_FIELDS
            if event.get(alias) is None
        ]
        if missing:
            raise InputValidationError(missing, f"Missing parameters: {', '.join(missing)}")

        try:
            return cls.model_validate(event)
        except ValidationError as exc:
            fields = [str(err["loc"][0]) for err in exc.errors() if err["loc"]]
            raise InputValidationError(fields, f"Invalid parameters: {exc}") from exc


class ItemRef(NamedTuple):
    """A single non-directory object yielded by an object lister."""

    bucket: str
    key: str

    @property
    def full_path(self) -> str:
        return f"{self.bucket}/{self.key}"


class KindQueryResult(NamedTuple):
    """Matches for a partition key filtered by record kind."""

    count: int
    messages: list[str]


class StateRecord(BaseModel):
    """One item in the state table."""

    partition_key: str
    kind: RecordKind
    timestamp: str = Field(default_factory=utc_timestamp)
    message: str

    def to_item(self) -> dict[str, str]:
        return {
            "PartitionKey": self.partition_key,
            "EventType": self.kind.value,
            "DateTime": self.timestamp,
            "Message": self.message,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> StateRecord:
        return cls(
            partition_key=item["PartitionKey"],
            kind=RecordKind(item["EventType"]),
            timestamp=item["DateTime"],
            message=str(item["Message"]),
        )

