"""Integration test fixtures — LocalStack DynamoDB and S3."""

from __future__ import annotations

import os
import sys
import uuid

import boto3
import pytest

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
STATE_TABLE = "chunkproc-activity-logs-inttest"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client(
            "dynamodb", region_name="us-east-1", endpoint_url=LOCALSTACK_URL,
            aws_access_key_id="test", aws_secret_access_key="test",
        )
        client.list_tables()
        return True
    except Exception:
        return False


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)


@pytest.fixture(scope="session")
def localstack_ddb():
    """DynamoDB resource pointing at LocalStack."""
    return boto3.resource(
        "dynamodb", region_name="us-east-1", endpoint_url=LOCALSTACK_URL,
        aws_access_key_id="test", aws_secret_access_key="test",
    )


@pytest.fixture(scope="session")
def localstack_s3():
    """S3 client pointing at LocalStack."""
    return boto3.client(
        "s3", region_name="us-east-1", endpoint_url=LOCALSTACK_URL,
        aws_access_key_id="test", aws_secret_access_key="test",
    )


@pytest.fixture(scope="session")
def state_table(localstack_ddb):
    """Create the state table via the setup script."""
    sys.path.insert(0, str(os.path.join(os.path.dirname(__file__), "..", "..", "scripts")))
    from create_state_table import create_state_table

    create_state_table(localstack_ddb, STATE_TABLE)
    localstack_ddb.meta.client.get_waiter("table_exists").wait(TableName=STATE_TABLE)
    return STATE_TABLE


@pytest.fixture
def seeded_bucket(localstack_s3):
    """A fresh bucket holding ten objects under ``in/`` plus a directory marker."""
    sys.path.insert(0, str(os.path.join(os.path.dirname(__file__), "..", "..", "scripts")))
    from create_state_table import seed_objects

    bucket = f"chunkproc-inttest-{uuid.uuid4().hex[:8]}"
    seed_objects(localstack_s3, bucket, "in/", 10)
    return bucket
