"""
Diversity Re-ranking Tests

The reranker only ever multiplies scores by penalty factors <= 1, so no
candidate may gain score. Clusters that dominate the head of the list are
pushed down.

Run:
----
    pytest tests/test_diversity.py -v
"""

import random

import pytest

from matchmaker.models import BrandCampaign, ScoredCandidate
from matchmaker.stages import (
    BRAND_ROLE,
    CREATOR_ROLE,
    apply_diversity_reranking,
    resolve_tag_sets,
    score_candidates,
)


def _scored(influencer, score):
    return ScoredCandidate(candidate=influencer, score=score)


class TestNeverIncreasesScore:

    def test_random_pools(self, make_influencer):
        rng = random.Random(99)
        niches = ["Fashion", "Beauty", "Tech"]
        geos = ["Mumbai", "Delhi"]
        for _ in range(50):
            items = [
                _scored(
                    make_influencer(
                        id=f"inf-{i}",
                        niches=rng.sample(niches, rng.randint(0, 2)),
                        audience_geo=rng.sample(geos, rng.randint(0, 2)),
                    ),
                    rng.random(),
                )
                for i in range(rng.randint(0, 15))
            ]
            items.sort(key=lambda s: s.score, reverse=True)
            before = {s.canonical_id: s.score for s in items}

            reranked = apply_diversity_reranking(items, BRAND_ROLE)

            assert len(reranked) == len(items)
            for s in reranked:
                assert s.score <= before[s.canonical_id]

    def test_input_not_mutated(self, make_influencer):
        items = [_scored(make_influencer(id=f"inf-{i}"), 0.9 - i * 0.1) for i in range(4)]
        snapshot = [s.score for s in items]
        apply_diversity_reranking(items, BRAND_ROLE)
        assert [s.score for s in items] == snapshot


class TestPenalties:

    def test_first_item_never_penalized(self, make_influencer):
        items = [_scored(make_influencer(id="a"), 0.9), _scored(make_influencer(id="b"), 0.8)]
        reranked = apply_diversity_reranking(items, BRAND_ROLE)
        assert reranked[0].canonical_id == "a"
        assert reranked[0].score == 0.9

    def test_repeat_cluster_penalized_on_both_tags(self, make_influencer):
        # Same niche and geo: second item sees share 1/2 > 0.4 for both tags.
        items = [_scored(make_influencer(id="a"), 0.9), _scored(make_influencer(id="b"), 0.8)]
        reranked = apply_diversity_reranking(items, BRAND_ROLE)
        assert reranked[1].score == pytest.approx(0.8 * 0.8 * 0.85)

    def test_dominant_cluster_pushed_below_distinct_item(self, make_influencer):
        items = [
            _scored(make_influencer(id="f1"), 0.90),
            _scored(make_influencer(id="f2"), 0.85),
            _scored(make_influencer(id="t1", niches=["Tech"], audience_geo=["Delhi"]), 0.70),
        ]
        order = [s.canonical_id for s in apply_diversity_reranking(items, BRAND_ROLE)]
        assert order == ["f1", "t1", "f2"]

    def test_distinct_tags_not_penalized(self, make_influencer):
        # Every tag appears once, so no share ever exceeds 0.4.
        items = [
            _scored(make_influencer(id="f1"), 0.9),
            _scored(make_influencer(id="t1", niches=["Tech"], audience_geo=["Delhi"]), 0.8),
            _scored(make_influencer(id="b1", niches=["Beauty"], audience_geo=["Pune"]), 0.7),
            _scored(make_influencer(id="t2", niches=["Travel"], audience_geo=["Goa"]), 0.6),
        ]
        reranked = apply_diversity_reranking(items, BRAND_ROLE)
        assert [s.score for s in reranked] == [0.9, 0.8, 0.7, 0.6]

    def test_total_score_never_grows(self, make_pool, fashion_campaign):
        scored = score_candidates(make_pool(10), fashion_campaign)
        reranked = apply_diversity_reranking(scored, BRAND_ROLE)
        assert sum(s.score for s in reranked) <= sum(s.score for s in scored)


class TestTagSets:

    def test_brand_role_uses_influencer_tags(self, make_influencer):
        tags = resolve_tag_sets(make_influencer(niches=["Beauty"], audience_geo=["Pune"]), BRAND_ROLE)
        assert list(tags.primary) == ["Beauty"]
        assert list(tags.secondary) == ["Pune"]

    def test_creator_role_uses_campaign_tags(self):
        campaign = BrandCampaign(id="c", categories=["Tech"], target_geo=["Delhi"], max_price=1000)
        tags = resolve_tag_sets(campaign, CREATOR_ROLE)
        assert list(tags.primary) == ["Tech"]
        assert list(tags.secondary) == ["Delhi"]

    def test_mismatched_role_has_no_tags(self, make_influencer):
        tags = resolve_tag_sets(make_influencer(), CREATOR_ROLE)
        assert not tags.primary and not tags.secondary
