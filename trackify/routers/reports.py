import logging

from fastapi import APIRouter, Depends

from trackify.models.report import ExpenseSummary
from trackify.routers.deps import get_current_user_id, get_summary_aggregator
from trackify.services.reports import SummaryAggregator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/summary", response_model=ExpenseSummary)
def get_summary(
    user_id: int = Depends(get_current_user_id),
    aggregator: SummaryAggregator = Depends(get_summary_aggregator),
):
    """
    Grand total plus one entry per category name with its total and share.
    Computed on every call; nothing is cached.
    """
    summary = aggregator.summarize(user_id)
    logger.info(f"Summary for user {user_id}: total={summary.total}, categories={len(summary.by_category)}")
    return summary
