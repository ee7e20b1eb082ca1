"""Create the chunk processor state table and, optionally, demo objects.

Usage:
    python scripts/create_state_table.py --table activity-logs --endpoint-url http://localhost:4566
    python scripts/create_state_table.py --table activity-logs --bucket demo --prefix in/ --objects 25
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3


def create_state_table(ddb: Any, table_name: str) -> bool:
    """Create the state table keyed by PartitionKey/DateTime.

    Returns False if the table already exists.
    """
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])
    if table_name in existing:
        print(f"  Table {table_name} already exists, skipping")
        return False

    client.create_table(
        TableName=table_name,
        KeySchema=[
            {"AttributeName": "PartitionKey", "KeyType": "HASH"},
            {"AttributeName": "DateTime", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PartitionKey", "AttributeType": "S"},
            {"AttributeName": "DateTime", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    print(f"  Created table {table_name}")
    return True


def seed_objects(s3: Any, bucket: str, prefix: str, count: int) -> list[str]:
    """Create a bucket holding ``count`` small objects plus a directory marker."""
    existing = [b["Name"] for b in s3.list_buckets().get("Buckets", [])]
    if bucket not in existing:
        s3.create_bucket(Bucket=bucket)

    s3.put_object(Bucket=bucket, Key=prefix, Body=b"")
    keys = [f"{prefix}{i:05d}.json" for i in range(count)]
    for key in keys:
        s3.put_object(Bucket=bucket, Key=key, Body=b"{}")
    print(f"  Seeded {count} objects under s3://{bucket}/{prefix}")
    return keys


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the chunk processor state table")
    parser.add_argument("--table", required=True, help="State table name")
    parser.add_argument("--endpoint-url", default=None, help="AWS endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    parser.add_argument("--bucket", default=None, help="Also seed demo objects into this bucket")
    parser.add_argument("--prefix", default="input/", help="Key prefix for demo objects")
    parser.add_argument("--objects", type=int, default=10, help="Number of demo objects")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    print("Creating state table...")
    create_state_table(boto3.resource("dynamodb", **kwargs), args.table)

    if args.bucket:
        print("Seeding objects...")
        seed_objects(boto3.client("s3", **kwargs), args.bucket, args.prefix, args.objects)

    print("Done!")


if __name__ == "__main__":
    main()
