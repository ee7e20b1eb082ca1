"""Shared fixtures."""

from __future__ import annotations

import pytest

ARN = "arn:aws:states:us-east-1:123456789012:execution:ingest-machine:run-42"


@pytest.fixture
def event():
    return {
        "owner": "acme",
        "sfnExecutionId": ARN,
        "bucketName": "data-bucket",
        "keyPrefix": "a/",
        "activityLogsTable": "activity-logs",
    }


@pytest.fixture(autouse=True)
def _aws_credentials(monkeypatch):
    """Keep boto3 away from real credentials."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
