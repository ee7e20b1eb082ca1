"""DynamoDB backend implementing IStateStore."""

from __future__ import annotations

import logging
from typing import Any

import boto3

from chunkproc.core.types import RecordKind
from chunkproc.models.job import KindQueryResult, StateRecord

logger = logging.getLogger(__name__)


class DynamoDBStateStore:
    """Production IStateStore backed by a DynamoDB table.

    Items are keyed by ``PartitionKey`` (hash) and ``DateTime`` (range), and
    tagged with an ``EventType`` of ``Count`` or ``Report``. ``DateTime`` is a
    microsecond UTC timestamp, so two writes to one partition in the same
    microsecond collide and the later put silently replaces the earlier record.
    """

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _table(self, name: str):
        return self._ddb.Table(name)

    def _query_kind(self, table: str, partition_key: str, kind: RecordKind) -> list[dict[str, Any]]:
        """Query every item for a partition key with the given EventType, across pages."""
        tbl = self._table(table)
        query: dict[str, Any] = {
            "KeyConditionExpression": "PartitionKey = :pk",
            "FilterExpression": "EventType = :et",
            "ExpressionAttributeValues": {":pk": partition_key, ":et": kind.value},
        }
        items: list[dict[str, Any]] = []
        while True:
            resp = tbl.query(**query)
            items.extend(resp.get("Items", []))
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                return items
            query["ExclusiveStartKey"] = last_key

    # ---- IStateStore methods ----

    def query_by_kind(self, table: str, partition_key: str, kind: RecordKind) -> KindQueryResult:
        records = [StateRecord.from_item(item) for item in self._query_kind(table, partition_key, kind)]
        return KindQueryResult(count=len(records), messages=[r.message for r in records])

    def put(self, table: str, partition_key: str, kind: RecordKind, timestamp: str, message: str) -> None:
        record = StateRecord(partition_key=partition_key, kind=kind, timestamp=timestamp, message=message)
        self._table(table).put_item(Item=record.to_item())
        logger.debug("Stored %s record for %s in %s", kind.value, partition_key, table)
