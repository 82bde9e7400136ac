from datetime import datetime, timezone
from typing import Optional

from botocore.exceptions import ClientError

from trackify.core.errors import Conflict
from trackify.db.dynamo import Database, optional_item, storage_failure, to_dynamo
from trackify.models.user import UserInDB


def _to_user(item: dict) -> UserInDB:
    return UserInDB(
        id=item["user_id"],
        name=item["name"],
        email=item["email"],
        password_hash=item["password_hash"],
        created_at=item["created_at"],
        updated_at=item["updated_at"],
    )


def _email_key(email: str) -> dict:
    return {"counter_name": f"email#{email}"}


class UserStore:
    """
    Users keyed by id, with one ``email#<address>`` item per user in the
    counters table. That item is written conditionally and is the only
    thing that makes an email unique.
    """

    def __init__(self, db: Database):
        self._db = db
        self._table = db.users_table
        self._emails = db.counters_table

    def get_by_email(self, email: str) -> Optional[UserInDB]:
        try:
            reservation = optional_item(self._emails.get_item(Key=_email_key(email), ConsistentRead=True))
        except ClientError as e:
            raise storage_failure("get_user_by_email", e)
        if not reservation:
            return None
        return self.get_by_id(reservation["user_id"])

    def get_by_id(self, user_id: int) -> Optional[UserInDB]:
        try:
            item = optional_item(self._table.get_item(Key={"user_id": user_id}, ConsistentRead=True))
        except ClientError as e:
            raise storage_failure("get_user_by_id", e)
        return _to_user(item) if item else None

    def create(self, name: str, email: str, password_hash: str) -> UserInDB:
        """Raises ``Conflict`` when another user already holds ``email``."""
        now = datetime.now(timezone.utc).isoformat()
        item = {
            "user_id": self._db.next_id("users"),
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "created_at": now,
            "updated_at": now,
        }
        self._reserve_email(email, item["user_id"])
        try:
            self._table.put_item(Item=to_dynamo(item))
        except ClientError as e:
            self._release_email(email)
            raise storage_failure("put_user", e)
        return _to_user(item)

    def _reserve_email(self, email: str, user_id: int) -> None:
        try:
            self._emails.put_item(
                Item={**_email_key(email), "user_id": user_id},
                ConditionExpression="attribute_not_exists(counter_name)",
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise Conflict("User already exists")
            raise storage_failure("reserve_email", e)

    def _release_email(self, email: str) -> None:
        try:
            self._emails.delete_item(Key=_email_key(email))
        except ClientError as e:
            raise storage_failure("release_email", e)
