"""
Request body validation.

Each public ``validate_*`` function takes the raw decoded JSON body and
returns a ``ValidationResult``. Stage one parses the body into its pydantic
model (types, required fields, formats). Stage two applies the checks the
schema cannot express, such as blank strings and the storage range of an
amount. Nothing is silently repaired: every problem becomes an issue with
the offending field's wire name.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from trackify.core.errors import ValidationError
from trackify.models.category import CategoryCreate
from trackify.models.expense import ExpenseCreate, quantize_amount
from trackify.models.user import UserCreate, UserLogin

T = TypeVar("T", bound=BaseModel)

# decimal(10, 2): eight integer digits
MAX_AMOUNT = Decimal("99999999.99")


@dataclass
class ValidationIssue:
    field: str
    message: str

    def to_dict(self):
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult(Generic[T]):
    value: Optional[T] = None
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.value is not None and not self.issues

    def unwrap(self) -> T:
        """Return the parsed value or raise ``ValidationError`` listing every issue."""
        if not self.is_valid:
            errors = [issue.to_dict() for issue in self.issues]
            summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
            raise ValidationError(errors, message=summary or None)
        return self.value


def _parse(model: Type[T], data: Any) -> ValidationResult[T]:
    if not isinstance(data, dict):
        return ValidationResult(issues=[ValidationIssue("body", "Request body must be a JSON object")])
    try:
        return ValidationResult(value=model.model_validate(data))
    except PydanticValidationError as e:
        issues = [
            ValidationIssue(".".join(str(part) for part in err["loc"]) or "body", err["msg"])
            for err in e.errors()
        ]
        return ValidationResult(issues=issues)


def _require_text(value: str, name: str) -> List[ValidationIssue]:
    if not value.strip():
        return [ValidationIssue(name, f"{name} should not be empty")]
    return []


def _validate(
    model: Type[T],
    data: Any,
    semantic_check: Callable[[T], List[ValidationIssue]],
) -> ValidationResult[T]:
    result = _parse(model, data)
    if result.value is None:
        return result
    issues = semantic_check(result.value)
    if issues:
        return ValidationResult(issues=issues)
    return result


def validate_register(data: Any) -> ValidationResult[UserCreate]:
    return _validate(
        UserCreate,
        data,
        lambda user: _require_text(user.name, "name") + _require_text(user.password, "password"),
    )


def validate_login(data: Any) -> ValidationResult[UserLogin]:
    return _validate(UserLogin, data, lambda login: _require_text(login.password, "password"))


def validate_category_create(data: Any) -> ValidationResult[CategoryCreate]:
    return _validate(CategoryCreate, data, lambda category: _require_text(category.name, "name"))


def _check_expense(expense: ExpenseCreate) -> List[ValidationIssue]:
    issues = _require_text(expense.description, "description")
    # Bound before rounding: quantize overflows the decimal context on huge values
    if expense.amount > MAX_AMOUNT:
        issues.append(ValidationIssue("amount", f"amount must not exceed {MAX_AMOUNT}"))
    elif quantize_amount(expense.amount) <= 0:
        issues.append(ValidationIssue("amount", "amount must be at least 0.01"))
    return issues


def validate_expense_create(data: Any) -> ValidationResult[ExpenseCreate]:
    return _validate(ExpenseCreate, data, _check_expense)
