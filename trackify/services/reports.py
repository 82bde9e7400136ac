from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from trackify.models.expense import ExpensePublic, quantize_amount
from trackify.models.report import CategoryBreakdown, ExpenseSummary
from trackify.services.expenses import ExpenseService

UNCATEGORIZED = "Uncategorized"
_HUNDRED = Decimal("100")


class SummaryAggregator:
    """
    Totals and per-category breakdown of a user's expenses.

    Buckets are keyed by category *name*, so two categories that share a name
    are reported as one. With ``legacy_percentage`` every bucket's percentage
    is its own total over itself (always 100), which is what older clients
    were served; otherwise it is the bucket's share of the grand total.
    """

    def __init__(self, expenses: ExpenseService, legacy_percentage: bool = False):
        self._expenses = expenses
        self._legacy_percentage = legacy_percentage

    def summarize(self, user_id: int) -> ExpenseSummary:
        return self.summarize_expenses(self._expenses.list_expenses(user_id))

    def total(self, expenses: List[ExpensePublic]) -> Decimal:
        return quantize_amount(sum((e.amount for e in expenses), Decimal("0")))

    def category_totals(self, expenses: List[ExpensePublic]) -> Dict[str, Decimal]:
        """Sum per category name, in the order names are first seen."""
        totals: Dict[str, Decimal] = defaultdict(Decimal)
        for expense in expenses:
            name = expense.category.name if expense.category else UNCATEGORIZED
            totals[name] += expense.amount
        return {name: quantize_amount(total) for name, total in totals.items()}

    def percentage(self, part: Decimal, whole: Decimal) -> float:
        if whole == 0:
            return 0.0
        return float((part / whole * _HUNDRED).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    def summarize_expenses(self, expenses: List[ExpensePublic]) -> ExpenseSummary:
        if not expenses:
            return ExpenseSummary(total=Decimal("0"), by_category=[])

        total = self.total(expenses)
        by_category = [
            CategoryBreakdown(
                category_name=name,
                total=category_total,
                percentage=self.percentage(
                    category_total,
                    category_total if self._legacy_percentage else total,
                ),
            )
            for name, category_total in self.category_totals(expenses).items()
        ]
        return ExpenseSummary(total=total, by_category=by_category)
