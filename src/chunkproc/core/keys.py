"""Partition key composition and execution id parsing."""

from __future__ import annotations

from chunkproc.core.exceptions import InputValidationError

EXECUTION_ID_SEGMENT = 7


def build_partition_key(owner: str, execution_id: str) -> str:
    """Combine owner and execution id into the job's partition key.

    Neither part is escaped, so ``#`` or ``:`` inside them pass through as-is.
    """
    return f"OWNER#{owner}#EXECUTION_ID#{execution_id}"


def extract_execution_id(source: str) -> str:
    """Return the 8th colon-delimited segment of a workflow execution ARN.

    ``arn:aws:states:us-east-1:123456789012:execution:my-machine:run-42``
    yields ``run-42``.
    """
    segments = source.split(":")
    if len(segments) <= EXECUTION_ID_SEGMENT:
        raise InputValidationError(
            ["sfnExecutionId"],
            f"sfnExecutionId must have at least {EXECUTION_ID_SEGMENT + 1} "
            f"colon-delimited segments, got {len(segments)}: {source!r}",
        )
    return segments[EXECUTION_ID_SEGMENT]
