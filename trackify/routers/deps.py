"""
Request dependencies: the bearer-token guard and explicit service wiring.

Every service is built per request from the process-wide ``Database``.
Tests swap the database through ``app.dependency_overrides[get_database]``.
"""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from trackify.core.config import settings
from trackify.core.errors import Unauthorized
from trackify.core.security import decode_access_token
from trackify.db.categories import CategoryStore
from trackify.db.dynamo import Database
from trackify.db.expenses import ExpenseStore
from trackify.db.users import UserStore
from trackify.services.auth import AuthService
from trackify.services.categories import CategoryService
from trackify.services.expenses import ExpenseService
from trackify.services.reports import SummaryAggregator


@lru_cache()
def get_database() -> Database:
    return Database.from_settings(settings)


def get_current_user_id(authorization: Optional[str] = Header(None)) -> int:
    """Extract the acting user id from the ``Authorization: Bearer`` header."""
    if not authorization:
        raise Unauthorized("Token required")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthorized("Invalid authorization header")

    payload = decode_access_token(token.strip())
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise Unauthorized("Invalid token")


def get_auth_service(db: Database = Depends(get_database)) -> AuthService:
    return AuthService(UserStore(db))


def get_category_service(db: Database = Depends(get_database)) -> CategoryService:
    return CategoryService(CategoryStore(db))


def get_expense_service(
    db: Database = Depends(get_database),
    categories: CategoryService = Depends(get_category_service),
) -> ExpenseService:
    return ExpenseService(ExpenseStore(db), categories)


def get_summary_aggregator(expenses: ExpenseService = Depends(get_expense_service)) -> SummaryAggregator:
    return SummaryAggregator(expenses, legacy_percentage=settings.SUMMARY_LEGACY_PERCENTAGE)
