"""Resumable chunk selection over an object listing.

Each invocation resolves the job's total item count (computed once and
cached as a ``Count`` record), counts the ``Report`` records written by
earlier invocations, then skips that many items in listing order and records
up to ``chunk_size`` more. All progress lives in the state store, so an
invocation that dies part-way is resumed by simply running it again.

Callers must ensure a single in-flight invocation per partition key: there
is no locking and no conditional write, so overlapping runs may duplicate
reports or write a second ``Count`` record.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from itertools import islice

from chunkproc.core.exceptions import ConfigurationError, CorruptCountError, DuplicateCountError
from chunkproc.core.protocols import IObjectLister, IStateStore
from chunkproc.core.types import RecordKind
from chunkproc.models.job import JobInput, utc_timestamp

logger = logging.getLogger(__name__)


class ChunkProcessor:
    """Selects and records the next bounded slice of unprocessed objects."""

    def __init__(self, lister: IObjectLister, state_store: IStateStore, chunk_size: int) -> None:
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
            raise ConfigurationError(f"chunk_size must be a positive integer, got {chunk_size!r}")
        self._lister = lister
        self._state = state_store
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def get_or_store_count(self, table: str, partition_key: str, counter: Callable[[], int]) -> int:
        """Return the cached total for a job, running ``counter`` only on a cold start."""
        result = self._state.query_by_kind(table, partition_key, RecordKind.COUNT)

        if result.count == 1:
            total = _parse_count(table, partition_key, result.messages[0])
            logger.info("Count cache hit for %s: %d", partition_key, total)
            return total

        if result.count == 0:
            total = counter()
            self._state.put(table, partition_key, RecordKind.COUNT, utc_timestamp(), str(total))
            logger.info("Count cache miss for %s: stored %d", partition_key, total)
            return total

        raise DuplicateCountError(table, partition_key, result.count)

    def count_reports(self, table: str, partition_key: str) -> int:
        return self._state.query_by_kind(table, partition_key, RecordKind.REPORT).count

    def store_report(self, table: str, partition_key: str, full_path: str) -> None:
        self._state.put(table, partition_key, RecordKind.REPORT, utc_timestamp(), full_path)
        logger.debug("Recorded report %s for %s", full_path, partition_key)

    def fetch_next_chunk(
        self,
        bucket: str,
        prefix: str,
        offset: int,
        on_collect: Callable[[str], None],
    ) -> list[str]:
        """Skip ``offset`` items, then collect up to ``chunk_size``.

        ``on_collect`` is called, and must return, for each path before it is
        added to the result. The listing is consumed only as far as needed.
        """
        chunk: list[str] = []
        for ref in islice(self._lister.list(bucket, prefix), offset, offset + self._chunk_size):
            on_collect(ref.full_path)
            chunk.append(ref.full_path)
        return chunk

    def process(self, job: JobInput) -> list[str]:
        """Run one invocation for ``job``.

        Returns the newly recorded paths, or an empty list once every item
        has been reported.
        """
        pk = job.partition_key

        total = self.get_or_store_count(job.table, pk, lambda: self._lister.count(job.bucket, job.prefix))
        handled = self.count_reports(job.table, pk)
        logger.info("Job %s: %d of %d items already handled", pk, handled, total)

        if handled >= total:
            logger.info("Job %s: nothing left to handle", pk)
            return []

        chunk = self.fetch_next_chunk(
            job.bucket,
            job.prefix,
            handled,
            lambda full_path: self.store_report(job.table, pk, full_path),
        )
        logger.info("Job %s: selected %d items", pk, len(chunk))
        return chunk


def _parse_count(table: str, partition_key: str, message: str) -> int:
    try:
        total = int(message)
    except (TypeError, ValueError) as exc:
        raise CorruptCountError(table, partition_key, message) from exc
    if total < 0:
        raise CorruptCountError(table, partition_key, message)
    return total
