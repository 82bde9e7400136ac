from datetime import datetime, timezone
from typing import List, Optional

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from trackify.db.dynamo import Database, optional_item, query_all, storage_failure, to_dynamo
from trackify.models.category import CategoryPublic


def _to_category(item: dict) -> CategoryPublic:
    return CategoryPublic(
        id=item["category_id"],
        name=item["name"],
        user_id=item["user_id"],
        created_at=item["created_at"],
        updated_at=item["updated_at"],
    )


class CategoryStore:
    """Categories partitioned by owning user; key is (user_id, category_id)."""

    def __init__(self, db: Database):
        self._db = db
        self._table = db.categories_table

    def list_for_user(self, user_id: int) -> List[CategoryPublic]:
        """All categories of ``user_id`` in storage order (ascending id)."""
        try:
            items = list(query_all(self._table, KeyConditionExpression=Key("user_id").eq(user_id)))
        except ClientError as e:
            raise storage_failure("get_categories_for_user", e)
        return [_to_category(item) for item in items]

    def get(self, user_id: int, category_id: int) -> Optional[CategoryPublic]:
        try:
            item = optional_item(
                self._table.get_item(Key={"user_id": user_id, "category_id": category_id})
            )
        except ClientError as e:
            raise storage_failure("get_category", e)
        return _to_category(item) if item else None

    def create(self, user_id: int, name: str) -> CategoryPublic:
        now = datetime.now(timezone.utc).isoformat()
        item = {
            "user_id": user_id,
            "category_id": self._db.next_id("categories"),
            "name": name,
            "created_at": now,
            "updated_at": now,
        }
        try:
            self._table.put_item(Item=to_dynamo(item))
        except ClientError as e:
            raise storage_failure("put_category", e)
        return _to_category(item)
