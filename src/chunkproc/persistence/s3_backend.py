"""S3 object lister implementing IObjectLister."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import boto3

from chunkproc.models.job import ItemRef

logger = logging.getLogger(__name__)

DIRECTORY_SUFFIX = "/"


def is_directory_marker(key: str) -> bool:
    return key.endswith(DIRECTORY_SUFFIX)


class S3ObjectLister:
    """Production IObjectLister backed by S3 ListObjectsV2.

    S3 returns keys in ascending UTF-8 binary order, which keeps the
    positional resume offset stable between invocations.
    """

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None,
                 page_size: int = 1000) -> None:
        self._page_size = page_size
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def count(self, bucket: str, prefix: str) -> int:
        total = sum(1 for _ in self.list(bucket, prefix))
        logger.info("Counted %d objects under s3://%s/%s", total, bucket, prefix)
        return total

    def list(self, bucket: str, prefix: str) -> Iterator[ItemRef]:
        """Lazily yield non-directory objects; pages are fetched on demand."""
        paginator = self._client.get_paginator("list_objects_v2")
        pages = paginator.paginate(
            Bucket=bucket,
            Prefix=prefix,
            PaginationConfig={"PageSize": self._page_size},
        )
        for page in pages:
            for obj in page.get("Contents", []):
                key = obj["Key"]
                if is_directory_marker(key):
                    continue
                yield ItemRef(bucket=bucket, key=key)
