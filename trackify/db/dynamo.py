import logging
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional

import boto3
from botocore.exceptions import ClientError

from trackify.core.config import Settings
from trackify.core.errors import StorageError

logger = logging.getLogger(__name__)


class Database:
    """
    Handles to the DynamoDB tables used by the stores.

    Nothing is created at import time: build one with ``from_settings`` (the
    API does this once per process) or hand in an existing boto3 resource.
    """

    def __init__(self, resource, settings: Settings):
        self.resource = resource
        self.settings = settings
        self.users_table = resource.Table(settings.DYNAMO_USERS_TABLE)
        self.categories_table = resource.Table(settings.DYNAMO_CATEGORIES_TABLE)
        self.expenses_table = resource.Table(settings.DYNAMO_EXPENSES_TABLE)
        self.counters_table = resource.Table(settings.DYNAMO_COUNTERS_TABLE)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        resource = boto3.resource(
            "dynamodb",
            region_name=settings.DYNAMO_REGION,
            endpoint_url=settings.DYNAMO_ENDPOINT_URL,
        )
        return cls(resource, settings)

    def create_tables(self) -> List[str]:
        """Create any missing table. Returns the names that were created."""
        existing = {table.name for table in self.resource.tables.all()}
        created = []
        for definition in self._table_definitions():
            name = definition["TableName"]
            if name in existing:
                continue
            logger.info(f"Creating DynamoDB table {name}")
            table = self.resource.create_table(BillingMode="PAY_PER_REQUEST", **definition)
            table.wait_until_exists()
            created.append(name)
        return created

    def _table_definitions(self) -> List[Dict[str, Any]]:
        return [
            {
                "TableName": self.settings.DYNAMO_USERS_TABLE,
                "KeySchema": [{"AttributeName": "user_id", "KeyType": "HASH"}],
                "AttributeDefinitions": [
                    {"AttributeName": "user_id", "AttributeType": "N"},
                ],
            },
            {
                "TableName": self.settings.DYNAMO_CATEGORIES_TABLE,
                "KeySchema": [
                    {"AttributeName": "user_id", "KeyType": "HASH"},
                    {"AttributeName": "category_id", "KeyType": "RANGE"},
                ],
                "AttributeDefinitions": [
                    {"AttributeName": "user_id", "AttributeType": "N"},
                    {"AttributeName": "category_id", "AttributeType": "N"},
                ],
            },
            {
                "TableName": self.settings.DYNAMO_EXPENSES_TABLE,
                "KeySchema": [
                    {"AttributeName": "user_id", "KeyType": "HASH"},
                    {"AttributeName": "expense_id", "KeyType": "RANGE"},
                ],
                "AttributeDefinitions": [
                    {"AttributeName": "user_id", "AttributeType": "N"},
                    {"AttributeName": "expense_id", "AttributeType": "N"},
                ],
            },
            {
                "TableName": self.settings.DYNAMO_COUNTERS_TABLE,
                "KeySchema": [{"AttributeName": "counter_name", "KeyType": "HASH"}],
                "AttributeDefinitions": [
                    {"AttributeName": "counter_name", "AttributeType": "S"},
                ],
            },
        ]

    def next_id(self, counter_name: str) -> int:
        """Atomically bump and return the named counter (first value is 1)."""
        try:
            response = self.counters_table.update_item(
                Key={"counter_name": counter_name},
                UpdateExpression="ADD #v :one",
                ExpressionAttributeNames={"#v": "value"},
                ExpressionAttributeValues={":one": 1},
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            raise storage_failure("next_id", e)
        return int(response["Attributes"]["value"])


def query_all(table, **kwargs) -> Iterator[Dict[str, Any]]:
    """Run a query and follow ``LastEvaluatedKey`` until every page is read."""
    while True:
        response = table.query(**kwargs)
        for item in response.get("Items", []):
            yield from_dynamo(item)
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return
        kwargs["ExclusiveStartKey"] = last_key


def storage_failure(operation: str, error: ClientError) -> StorageError:
    message = error.response.get("Error", {}).get("Message", str(error))
    logger.error(f"{operation} failed: {message}")
    return StorageError(f"{operation} failed")


def to_dynamo(obj: Any):
    """
    Recursively convert floats to Decimal for DynamoDB compatibility.
    """
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        return {k: to_dynamo(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, list):
        return [to_dynamo(v) for v in obj]
    return obj


def from_dynamo(obj: Any):
    """
    Convert whole-number Decimals (ids, counters) back to int.
    Fractional values such as amounts stay Decimal.
    """
    if isinstance(obj, list):
        return [from_dynamo(item) for item in obj]
    if isinstance(obj, dict):
        return {k: from_dynamo(v) for k, v in obj.items()}
    if isinstance(obj, Decimal) and obj == obj.to_integral_value():
        return int(obj)
    return obj


def optional_item(response: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    item = response.get("Item")
    return from_dynamo(item) if item else None
