"""In-memory backends for unit tests — dict-backed fakes."""

from __future__ import annotations

from collections.abc import Iterator

from chunkproc.core.types import RecordKind
from chunkproc.models.job import ItemRef, KindQueryResult, StateRecord
from chunkproc.persistence.s3_backend import is_directory_marker


class MemoryObjectLister:
    """Dict-backed IObjectLister for unit tests.

    Keys are listed in lexicographic order, like S3. Call and consumption
    counters let tests assert how much of the listing was touched.
    """

    def __init__(self, objects: dict[str, list[str]] | None = None) -> None:
        self._objects: dict[str, list[str]] = {b: list(keys) for b, keys in (objects or {}).items()}
        self.count_calls = 0
        self.list_calls = 0
        self.yielded = 0

    def count(self, bucket: str, prefix: str) -> int:
        self.count_calls += 1
        return sum(1 for _ in self._iter(bucket, prefix))

    def list(self, bucket: str, prefix: str) -> Iterator[ItemRef]:
        self.list_calls += 1
        for ref in self._iter(bucket, prefix):
            self.yielded += 1
            yield ref

    def _iter(self, bucket: str, prefix: str) -> Iterator[ItemRef]:
        for key in sorted(self._objects.get(bucket, [])):
            if key.startswith(prefix) and not is_directory_marker(key):
                yield ItemRef(bucket=bucket, key=key)

    @property
    def calls(self) -> int:
        return self.count_calls + self.list_calls


class MemoryStateStore:
    """List-backed IStateStore for unit tests."""

    def __init__(self) -> None:
        self._records: dict[str, list[StateRecord]] = {}
        self.query_calls = 0
        self.put_calls = 0

    def seed(self, table: str, partition_key: str, kind: RecordKind, message: str) -> None:
        """Insert a record without counting it as a call."""
        self._records.setdefault(table, []).append(
            StateRecord(partition_key=partition_key, kind=kind, message=message)
        )

    def records(self, table: str, partition_key: str, kind: RecordKind) -> list[StateRecord]:
        return [
            r for r in self._records.get(table, [])
            if r.partition_key == partition_key and r.kind == kind
        ]

    def query_by_kind(self, table: str, partition_key: str, kind: RecordKind) -> KindQueryResult:
        self.query_calls += 1
        matches = self.records(table, partition_key, kind)
        return KindQueryResult(count=len(matches), messages=[r.message for r in matches])

    def put(self, table: str, partition_key: str, kind: RecordKind, timestamp: str, message: str) -> None:
        self.put_calls += 1
        self._records.setdefault(table, []).append(
            StateRecord(partition_key=partition_key, kind=kind, timestamp=timestamp, message=message)
        )

    @property
    def calls(self) -> int:
        return self.query_calls + self.put_calls
