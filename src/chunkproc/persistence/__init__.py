"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from chunkproc.core.config import AppSettings
from chunkproc.persistence.dynamodb_backend import DynamoDBStateStore
from chunkproc.persistence.s3_backend import S3ObjectLister


def create_persistence(settings: AppSettings):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (object_lister, state_store).
    """
    object_lister = S3ObjectLister(
        region=settings.s3.region,
        endpoint_url=settings.s3.endpoint_url,
        page_size=settings.s3.page_size,
    )

    state_store = DynamoDBStateStore(
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
    )

    return object_lister, state_store
