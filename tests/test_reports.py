from datetime import date, datetime, timezone
from decimal import Decimal

from trackify.models.category import CategoryPublic
from trackify.models.expense import ExpensePublic
from trackify.services.reports import SummaryAggregator

NOW = datetime(2025, 11, 1, tzinfo=timezone.utc)


def _category(category_id, name):
    return CategoryPublic(id=category_id, name=name, user_id=1, created_at=NOW, updated_at=NOW)


def _expense(expense_id, amount, category):
    return ExpensePublic(
        id=expense_id,
        amount=Decimal(amount),
        description="test",
        date=date(2025, 11, expense_id),
        category_id=category.id,
        user_id=1,
        created_at=NOW,
        updated_at=NOW,
        category=category,
    )


food = _category(1, "Food")
rent = _category(2, "Rent")
food_again = _category(3, "Food")

sample_expenses = [
    _expense(1, "250.00", food),
    _expense(2, "1000.00", rent),
    _expense(3, "150.00", food),
    _expense(4, "100.00", food_again),
]


def test_calculate_total():
    analyzer = SummaryAggregator(expenses=None)
    assert analyzer.total(sample_expenses) == Decimal("1500.00")


def test_category_totals_group_by_name():
    analyzer = SummaryAggregator(expenses=None)
    result = analyzer.category_totals(sample_expenses)
    # Both "Food" categories land in one bucket
    assert result == {"Food": Decimal("500.00"), "Rent": Decimal("1000.00")}


def test_summary_percentages_share_of_total():
    analyzer = SummaryAggregator(expenses=None)
    summary = analyzer.summarize_expenses(sample_expenses)
    assert summary.total == Decimal("1500.00")
    breakdown = {item.category_name: item for item in summary.by_category}
    assert breakdown["Food"].total == Decimal("500.00")
    assert breakdown["Food"].percentage == 33.33
    assert breakdown["Rent"].percentage == 66.67


def test_summary_legacy_percentage_is_always_100():
    analyzer = SummaryAggregator(expenses=None, legacy_percentage=True)
    summary = analyzer.summarize_expenses(sample_expenses)
    assert [item.percentage for item in summary.by_category] == [100.0, 100.0]


def test_summary_of_no_expenses():
    analyzer = SummaryAggregator(expenses=None)
    summary = analyzer.summarize_expenses([])
    assert summary.total == 0
    assert summary.by_category == []


def test_summary_keeps_cents():
    analyzer = SummaryAggregator(expenses=None)
    summary = analyzer.summarize_expenses([_expense(1, "0.10", food), _expense(2, "0.20", rent)])
    assert summary.total == Decimal("0.30")
    assert summary.model_dump(mode="json", by_alias=True) == {
        "total": 0.3,
        "byCategory": [
            {"categoryName": "Food", "total": 0.1, "percentage": 33.33},
            {"categoryName": "Rent", "total": 0.2, "percentage": 66.67},
        ],
    }


def test_percentage_with_zero_total():
    analyzer = SummaryAggregator(expenses=None)
    assert analyzer.percentage(Decimal("0"), Decimal("0")) == 0.0
