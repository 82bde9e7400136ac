from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from trackify.db.dynamo import Database, query_all, storage_failure, to_dynamo
from trackify.models.expense import ExpensePublic, quantize_amount


def _to_expense(item: dict) -> ExpensePublic:
    return ExpensePublic(
        id=item["expense_id"],
        amount=quantize_amount(item["amount"]),
        description=item["description"],
        date=item["date"],
        category_id=item["category_id"],
        user_id=item["user_id"],
        created_at=item["created_at"],
        updated_at=item["updated_at"],
    )


class ExpenseStore:
    """Expenses partitioned by owning user; key is (user_id, expense_id)."""

    def __init__(self, db: Database):
        self._db = db
        self._table = db.expenses_table

    def list_for_user(self, user_id: int) -> List[ExpensePublic]:
        """All expenses of ``user_id`` in storage order (ascending id), category not attached."""
        try:
            items = list(query_all(self._table, KeyConditionExpression=Key("user_id").eq(user_id)))
        except ClientError as e:
            raise storage_failure("get_expenses_for_user", e)
        return [_to_expense(item) for item in items]

    def create(
        self,
        user_id: int,
        amount: Decimal,
        description: str,
        expense_date: date,
        category_id: int,
    ) -> ExpensePublic:
        now = datetime.now(timezone.utc).isoformat()
        item = {
            "user_id": user_id,
            "expense_id": self._db.next_id("expenses"),
            "amount": quantize_amount(amount),
            "description": description,
            "date": expense_date.isoformat(),
            "category_id": category_id,
            "created_at": now,
            "updated_at": now,
        }
        try:
            self._table.put_item(Item=to_dynamo(item))
        except ClientError as e:
            raise storage_failure("put_expense", e)
        return _to_expense(item)
