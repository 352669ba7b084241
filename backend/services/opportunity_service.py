"""
Opportunity board service.

Lists live local gig opportunities and applies the filter sidebar's
predicates. Everything here is pure and synchronous: the opportunity set is
a small fixed in-memory list, and the filter state is an explicit
OpportunityFilters value passed in by the caller.
"""

import logging
from typing import List, Optional, Sequence

from backend.schemas.opportunities import (
    Opportunity,
    OpportunityFilters,
    OpportunityListResponse,
)
from backend.utils.constants import FILTER_ALL

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No opportunities match your filters. Try adjusting your criteria."

SAMPLE_OPPORTUNITIES: List[Opportunity] = [
    Opportunity(
        id=1,
        title="Photographer Needed",
        description="Looking for a photographer for a birthday party this weekend in Koregaon Park.",
        location="koregaon-park",
        category="photography",
        budget=5000,
        date_posted="today",
    ),
    Opportunity(
        id=2,
        title="Custom Cake Request",
        description="Need a home baker for a themed cake for a child's birthday. Hinjewadi area.",
        location="hinjewadi",
        category="baking",
        budget=3000,
        date_posted="week",
    ),
    Opportunity(
        id=3,
        title="Logo Design for a New Cafe",
        description="A new cafe in Viman Nagar is looking for a freelance graphic designer to create a logo.",
        location="viman-nagar",
        category="design",
        budget=8000,
        date_posted="week",
    ),
    Opportunity(
        id=4,
        title="Personal Fitness Trainer",
        description="Looking for a certified fitness trainer for home sessions in Wakad area.",
        location="wakad",
        category="fitness",
        budget=12000,
        date_posted="today",
    ),
    Opportunity(
        id=5,
        title="Handmade Jewelry for Wedding",
        description="Need a craftsperson to create custom jewelry pieces for a wedding in Kothrud.",
        location="kothrud",
        category="crafts",
        budget=15000,
        date_posted="month",
    ),
    Opportunity(
        id=6,
        title="Social Media Content Creator",
        description="Small business in Koregaon Park needs monthly content creation for Instagram and Facebook.",
        location="koregaon-park",
        category="content",
        budget=20000,
        date_posted="week",
    ),
]


def list_opportunities() -> List[Opportunity]:
    """Return the current opportunity set (a copy, safe to mutate)."""
    return list(SAMPLE_OPPORTUNITIES)


def reset_filters() -> OpportunityFilters:
    """Initial "no constraint" filter state."""
    return OpportunityFilters()


def matches_filters(opportunity: Opportunity, filters: OpportunityFilters) -> bool:
    """True iff the opportunity passes every active filter (all ANDed)."""
    matches_location = filters.location == FILTER_ALL or opportunity.location == filters.location
    matches_category = filters.category == FILTER_ALL or opportunity.category == filters.category
    matches_budget = filters.budget_min <= opportunity.budget <= filters.budget_max
    matches_date = filters.date_posted == FILTER_ALL or opportunity.date_posted == filters.date_posted

    return matches_location and matches_category and matches_budget and matches_date


def filter_opportunities(
    opportunities: Sequence[Opportunity],
    filters: OpportunityFilters,
) -> List[Opportunity]:
    """Keep the opportunities that match, preserving order."""
    return [opp for opp in opportunities if matches_filters(opp, filters)]


def build_opportunity_view(
    filters: OpportunityFilters,
    opportunities: Optional[Sequence[Opportunity]] = None,
) -> OpportunityListResponse:
    """
    Build the listing view state.

    Args:
        filters: Current filter state
        opportunities: Loaded opportunities, or None if not loaded yet

    Returns:
        OpportunityListResponse with status "loading", "empty" or "ready"
    """
    if opportunities is None:
        return OpportunityListResponse(status="loading", filters=filters)

    matching = filter_opportunities(opportunities, filters)
    logger.debug(f"{len(matching)} of {len(opportunities)} opportunities match filters")

    if not matching:
        return OpportunityListResponse(
            status="empty",
            filters=filters,
            message=NO_MATCHES_MESSAGE,
        )

    return OpportunityListResponse(
        status="ready",
        opportunities=matching,
        count=len(matching),
        filters=filters,
    )
