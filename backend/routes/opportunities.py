"""
Live opportunities API endpoints.

Public endpoints backing the "Live Opportunities in Pune" board:
- GET /opportunities          filtered listing
- GET /opportunities/filters  sidebar options and the initial (reset) state

Filtering is stateless: the client sends its whole filter state as query
parameters on every request.
"""

import logging

from fastapi import APIRouter, Query, status

from backend.schemas.opportunities import (
    FilterOptionsResponse,
    OpportunityFilters,
    OpportunityListResponse,
)
from backend.services.opportunity_service import (
    build_opportunity_view,
    list_opportunities,
    reset_filters,
)
from backend.utils.constants import (
    BUDGET_RANGE_MAX,
    BUDGET_RANGE_MIN,
    CATEGORIES,
    DATE_POSTED_BUCKETS,
    FILTER_ALL,
    LOCATIONS,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/opportunities", tags=["opportunities"])


@router.get(
    "",
    response_model=OpportunityListResponse,
    status_code=status.HTTP_200_OK,
    summary="List live opportunities",
    description="""
    Returns the opportunities matching every active filter.

    - location / category / date_posted: exact match, or "all"
    - budget_min / budget_max: inclusive range in INR

    An empty result has status "empty" and a user-facing message.
    """
)
async def list_opportunities_endpoint(
    location: str = Query(FILTER_ALL, description="Location slug or 'all'"),
    category: str = Query(FILTER_ALL, description="Category slug or 'all'"),
    budget_min: int = Query(BUDGET_RANGE_MIN, ge=0, description="Lowest budget (inclusive)"),
    budget_max: int = Query(BUDGET_RANGE_MAX, ge=0, description="Highest budget (inclusive)"),
    date_posted: str = Query(FILTER_ALL, description="today / week / month or 'all'"),
) -> OpportunityListResponse:
    """List opportunities for the given filter state."""
    filters = OpportunityFilters(
        location=location,
        category=category,
        budget_min=budget_min,
        budget_max=budget_max,
        date_posted=date_posted,
    )
    logger.info(f"GET /opportunities with filters={filters.model_dump()}")

    view = build_opportunity_view(filters, list_opportunities())

    logger.info(f"Returning {view.count} opportunities (status={view.status})")
    return view


@router.get(
    "/filters",
    response_model=FilterOptionsResponse,
    status_code=status.HTTP_200_OK,
    summary="Filter sidebar options",
    description="Options for each filter and the state the Reset button restores."
)
async def get_filter_options() -> FilterOptionsResponse:
    """Return filter options and defaults."""
    return FilterOptionsResponse(
        locations=LOCATIONS,
        categories=CATEGORIES,
        date_posted=DATE_POSTED_BUCKETS,
        budget_min=BUDGET_RANGE_MIN,
        budget_max=BUDGET_RANGE_MAX,
        defaults=reset_filters(),
    )
