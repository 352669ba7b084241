"""
Pydantic schemas for the live opportunities board.

OpportunityFilters is the serializable view state of the filter sidebar.
It is passed to pure filter functions; the server keeps no filter state.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from backend.utils.constants import BUDGET_RANGE_MAX, BUDGET_RANGE_MIN, FILTER_ALL


class Opportunity(BaseModel):
    """A local gig someone posted."""
    id: int = Field(..., description="Opportunity identifier")
    title: str = Field(..., description="Short headline")
    description: str = Field(..., description="What the client needs")
    location: str = Field(..., description="Location slug", examples=["koregaon-park"])
    category: str = Field(..., description="Category slug", examples=["photography"])
    budget: int = Field(..., description="Budget in INR", ge=0, examples=[5000])
    date_posted: str = Field(
        ...,
        description="Coarse posting bucket",
        examples=["today", "week", "month"]
    )


class OpportunityFilters(BaseModel):
    """
    Filter sidebar state.

    "all" means no constraint for location, category and date_posted.
    The budget range is inclusive on both ends.
    """
    location: str = Field(FILTER_ALL, description="Location slug or 'all'")
    category: str = Field(FILTER_ALL, description="Category slug or 'all'")
    budget_min: int = Field(BUDGET_RANGE_MIN, ge=0, description="Lowest budget (inclusive)")
    budget_max: int = Field(BUDGET_RANGE_MAX, ge=0, description="Highest budget (inclusive)")
    date_posted: str = Field(FILTER_ALL, description="today / week / month or 'all'")


class OpportunityListResponse(BaseModel):
    """
    Response for GET /opportunities.

    status:
    - "loading": opportunities have not been loaded yet
    - "empty": loaded, but nothing matches the filters
    - "ready": at least one opportunity matches
    """
    status: Literal["loading", "empty", "ready"] = Field(..., description="View state")
    opportunities: List[Opportunity] = Field(default_factory=list)
    count: int = Field(0, ge=0, description="Number of matching opportunities")
    filters: OpportunityFilters = Field(..., description="Filters that produced this list")
    message: Optional[str] = Field(
        None,
        description="User-facing note for the empty state",
        examples=["No opportunities match your filters. Try adjusting your criteria."]
    )


class FilterOptionsResponse(BaseModel):
    """Response for GET /opportunities/filters: sidebar options and initial state."""
    locations: Dict[str, str] = Field(..., description="Location slug -> label")
    categories: Dict[str, str] = Field(..., description="Category slug -> label")
    date_posted: Dict[str, str] = Field(..., description="Bucket -> label")
    budget_min: int = Field(BUDGET_RANGE_MIN)
    budget_max: int = Field(BUDGET_RANGE_MAX)
    defaults: OpportunityFilters = Field(..., description="Initial (reset) filter state")
