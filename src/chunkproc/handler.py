"""AWS Lambda entry point for the chunk processor."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any

from chunkproc.core.config import AppSettings, load_settings
from chunkproc.models.job import JobInput
from chunkproc.persistence import create_persistence
from chunkproc.processor import ChunkProcessor

logger = logging.getLogger(__name__)

ALL_HANDLED = "All handled"


def create_processor(settings: AppSettings) -> ChunkProcessor:
    """Wire a ChunkProcessor to S3 and DynamoDB from application settings."""
    logging.getLogger("chunkproc").setLevel(settings.log_level)
    object_lister, state_store = create_persistence(settings)
    return ChunkProcessor(object_lister, state_store, settings.chunk_size)


@lru_cache(maxsize=1)
def default_processor() -> ChunkProcessor:
    """Processor shared by all invocations in this execution environment."""
    return create_processor(load_settings())


def handle(event: dict[str, Any], context: Any, processor: ChunkProcessor) -> list[str] | str:
    """Process one chunk for the job described by ``event``.

    Returns:
        ``"All handled"`` when nothing is left, otherwise the list of
        ``bucket/key`` paths recorded by this invocation.
    """
    logger.info("##### START #####")
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        logger.info("Request id: %s", request_id)

    job = JobInput.from_event(event)
    chunk = processor.process(job)

    logger.info("##### END #####")
    return chunk if chunk else ALL_HANDLED


def lambda_handler(event: dict[str, Any], context: Any) -> list[str] | str:
    return handle(event, context, default_processor())


# Built during the Lambda init phase: an invalid CHUNK_SIZE fails the cold start.
if os.environ.get("AWS_LAMBDA_FUNCTION_NAME"):
    default_processor()
