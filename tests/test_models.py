"""
Model Tests

Run:
----
    pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from matchmaker.errors import InvalidInteractionError
from matchmaker.models import (
    BrandCampaign,
    InteractionType,
    MatchFilters,
    ScoredCandidate,
    SessionState,
    canonical_id,
    exposure_id_for,
    parse_interaction_type,
)


class TestExposureIds:

    def test_canonical_id(self):
        assert canonical_id("inf-001") == "inf-001"
        assert canonical_id("inf-001::7") == "inf-001"
        assert canonical_id(exposure_id_for("inf-abc", 42)) == "inf-abc"

    def test_scored_candidate_id(self, make_influencer):
        scored = ScoredCandidate(candidate=make_influencer(id="inf-1"), score=0.4)
        assert scored.id == "inf-1"
        cycled = scored.model_copy(update={"exposure_id": exposure_id_for("inf-1", 3)})
        assert cycled.id == "inf-1::3"
        assert cycled.canonical_id == "inf-1"


class TestInteractionType:

    @pytest.mark.parametrize("value", ["like", "superlike", "pass", InteractionType.PASS])
    def test_known_types(self, value):
        assert parse_interaction_type(value) == InteractionType(value)

    @pytest.mark.parametrize("value", ["LIKE", "dislike", ""])
    def test_unknown_types(self, value):
        with pytest.raises(InvalidInteractionError) as exc_info:
            parse_interaction_type(value)
        assert exc_info.value.interaction_type == value

    def test_positive(self):
        assert InteractionType.LIKE.is_positive
        assert InteractionType.SUPERLIKE.is_positive
        assert not InteractionType.PASS.is_positive


class TestMatchFilters:

    def test_empty(self):
        assert MatchFilters().is_empty
        assert MatchFilters(niches=[], geo=[]).is_empty

    def test_zero_bounds_are_constraints(self):
        assert not MatchFilters(max_price=0).is_empty
        assert not MatchFilters(min_followers=0).is_empty
        assert not MatchFilters(platforms=["YouTube"]).is_empty


class TestSessionState:

    def test_reset_clears_all_parts(self, make_influencer):
        session = SessionState(actor_id="brand-1", ranking_key="k1", cursor=20)
        session.ranked = [ScoredCandidate(candidate=make_influencer(), score=0.5)]
        session.exposed_ids.add("inf-x")

        session.reset("k2")

        assert session.ranking_key == "k2"
        assert session.cursor == 0
        assert session.ranked is None
        assert session.exposed_ids == set()
        assert not session.is_materialized


class TestBrandCampaign:

    def test_budget_required(self):
        with pytest.raises(ValidationError):
            BrandCampaign(id="c", categories=["Fashion"])

    def test_misspelled_budget_rejected(self):
        with pytest.raises(ValidationError):
            BrandCampaign.model_validate({"id": "c", "maxPrice": 50000})

    def test_budget_present(self):
        assert BrandCampaign(id="c", max_price=50000).max_price == 50000
