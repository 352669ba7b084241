"""
Tests for the opportunity board filters.

All filters are ANDed; "all" means no constraint and the budget range is
inclusive on both ends.
"""

import pytest

from backend.schemas.opportunities import Opportunity, OpportunityFilters
from backend.services.opportunity_service import (
    NO_MATCHES_MESSAGE,
    build_opportunity_view,
    filter_opportunities,
    list_opportunities,
    matches_filters,
    reset_filters,
)


@pytest.fixture
def opportunities():
    return list_opportunities()


class TestFilterOpportunities:
    """Tests for filter_opportunities and matches_filters."""

    def test_default_filters_match_everything(self, opportunities):
        result = filter_opportunities(opportunities, reset_filters())
        assert [o.id for o in result] == [1, 2, 3, 4, 5, 6]

    def test_location(self, opportunities):
        filters = OpportunityFilters(location="koregaon-park")
        result = filter_opportunities(opportunities, filters)
        assert [o.id for o in result] == [1, 6]

    def test_category(self, opportunities):
        filters = OpportunityFilters(category="baking")
        assert [o.title for o in filter_opportunities(opportunities, filters)] == ["Custom Cake Request"]

    def test_budget_range_excludes_lower_budgets(self, opportunities):
        filters = OpportunityFilters(budget_min=10000, budget_max=50000)
        result = filter_opportunities(opportunities, filters)
        assert [o.budget for o in result] == [12000, 15000, 20000]

    def test_budget_bounds_are_inclusive(self):
        opp = Opportunity(
            id=99, title="t", description="d", location="wakad",
            category="fitness", budget=5000, date_posted="today",
        )
        assert matches_filters(opp, OpportunityFilters(budget_min=5000, budget_max=5000))
        assert not matches_filters(opp, OpportunityFilters(budget_min=5001))

    def test_date_posted(self, opportunities):
        filters = OpportunityFilters(date_posted="today")
        assert [o.id for o in filter_opportunities(opportunities, filters)] == [1, 4]

    def test_filters_are_anded(self, opportunities):
        filters = OpportunityFilters(location="koregaon-park", date_posted="week")
        assert [o.id for o in filter_opportunities(opportunities, filters)] == [6]

    def test_inverted_budget_range_matches_nothing(self, opportunities):
        filters = OpportunityFilters(budget_min=30000, budget_max=1000)
        assert filter_opportunities(opportunities, filters) == []

    def test_list_is_a_copy(self, opportunities):
        opportunities.clear()
        assert len(list_opportunities()) == 6


class TestOpportunityView:
    """Tests for build_opportunity_view."""

    def test_loading_when_not_loaded(self):
        view = build_opportunity_view(reset_filters(), None)
        assert view.status == "loading"
        assert view.opportunities == []

    def test_unknown_location_is_empty_not_loading(self, opportunities):
        view = build_opportunity_view(OpportunityFilters(location="mumbai"), opportunities)
        assert view.status == "empty"
        assert view.count == 0
        assert view.message == NO_MATCHES_MESSAGE

    def test_ready(self, opportunities):
        view = build_opportunity_view(OpportunityFilters(category="design"), opportunities)
        assert view.status == "ready"
        assert view.count == 1
        assert view.message is None
        assert view.filters.category == "design"

    def test_reset_restores_defaults(self):
        filters = reset_filters()
        assert filters.location == "all"
        assert filters.category == "all"
        assert filters.date_posted == "all"
        assert (filters.budget_min, filters.budget_max) == (0, 50000)
