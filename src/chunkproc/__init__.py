"""Resumable, chunked processing of S3 listings with DynamoDB-backed progress."""

from __future__ import annotations

__version__ = "0.1.0"
