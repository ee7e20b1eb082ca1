"""Chunk processor exception hierarchy."""

from __future__ import annotations


class ChunkProcError(Exception):
    """Base exception for all chunk processor errors."""


class ConfigurationError(ChunkProcError):
    """Settings are missing or invalid (e.g. CHUNK_SIZE)."""


class InputValidationError(ChunkProcError):
    """Invocation event is missing required fields or is malformed."""

    def __init__(self, fields: list[str], message: str) -> None:
        self.fields = fields
        super().__init__(message)


class StateInvariantError(ChunkProcError):
    """Persisted job state violates an invariant and cannot be trusted."""


class DuplicateCountError(StateInvariantError):
    """More than one Count record exists for a partition key."""

    def __init__(self, table: str, partition_key: str, count: int) -> None:
        self.table = table
        self.partition_key = partition_key
        self.count = count
        super().__init__(
            f"Multiple Count events ({count}) found for PartitionKey: {partition_key} in table: {table}"
        )


class CorruptCountError(StateInvariantError):
    """The stored Count record does not hold a non-negative integer."""

    def __init__(self, table: str, partition_key: str, message: str) -> None:
        self.table = table
        self.partition_key = partition_key
        self.message = message
        super().__init__(
            f"Count event for PartitionKey: {partition_key} in table: {table} "
            f"has unparsable Message {message!r}"
        )
