import logging
from typing import List

from trackify.db.expenses import ExpenseStore
from trackify.models.expense import ExpenseCreate, ExpensePublic
from trackify.services.categories import CategoryService

logger = logging.getLogger(__name__)


class ExpenseService:
    def __init__(self, expenses: ExpenseStore, categories: CategoryService):
        self._expenses = expenses
        self._categories = categories

    def list_expenses(self, user_id: int) -> List[ExpensePublic]:
        """
        Expenses of ``user_id`` newest date first, each with its category attached.

        The sort is stable over storage order, so same-day expenses stay in
        creation order.
        """
        expenses = self._expenses.list_for_user(user_id)
        categories = {c.id: c for c in self._categories.list_categories(user_id)}
        joined = [
            expense.model_copy(update={"category": categories.get(expense.category_id)})
            for expense in expenses
        ]
        return sorted(joined, key=lambda e: e.date, reverse=True)

    def create_expense(self, user_id: int, expense: ExpenseCreate) -> ExpensePublic:
        # Raises NotFound before anything is written
        category = self._categories.get_category_owned(expense.category_id, user_id)

        created = self._expenses.create(
            user_id=user_id,
            amount=expense.amount,
            description=expense.description,
            expense_date=expense.date,
            category_id=category.id,
        )
        logger.info(f"User {user_id} created expense {created.id} in category {category.id}")
        return created
