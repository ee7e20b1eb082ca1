"""Protocol interfaces for the chunk processor's collaborators.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from chunkproc.core.types import RecordKind

if TYPE_CHECKING:
    from chunkproc.models.job import ItemRef, KindQueryResult


# ---------------------------------------------------------------------------
# Object Lister
# ---------------------------------------------------------------------------

@runtime_checkable
class IObjectLister(Protocol):
    """Enumerates non-directory objects under a prefix in a stable order."""

    def count(self, bucket: str, prefix: str) -> int: ...

    def list(self, bucket: str, prefix: str) -> Iterator[ItemRef]: ...


# ---------------------------------------------------------------------------
# State Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IStateStore(Protocol):
    """Key-value store of job state records, partitioned by job identity."""

    def query_by_kind(self, table: str, partition_key: str, kind: RecordKind) -> KindQueryResult: ...

    def put(
        self, table: str, partition_key: str, kind: RecordKind, timestamp: str, message: str
    ) -> None: ...
