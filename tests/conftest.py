"""
Pytest configuration and shared fixtures for the matching engine tests.
"""

import random
from typing import Callable, List

import pytest

from matchmaker.models import BrandCampaign, GenderMix, Influencer, MatchmakerConfig
from matchmaker_server.services import (
    InMemoryCandidateRepository,
    InMemoryInteractionStore,
    SessionBatcher,
)


class FixedDrawRandom(random.Random):
    """Random source whose uniform draw is pinned; shuffles stay seeded."""

    def __init__(self, draw: float, seed: int = 7):
        super().__init__(seed)
        self._draw = draw

    def random(self) -> float:
        return self._draw


# Draw 0.0 always triggers exploration; 0.99 never does.
ALWAYS_EXPLORE = 0.0
NEVER_EXPLORE = 0.99


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def make_influencer() -> Callable[..., Influencer]:
    """Factory for an eligible influencer; override any field by keyword."""

    def _make(id: str = "inf-x", **overrides) -> Influencer:
        data = {
            "id": id,
            "handle": f"@{id}",
            "niches": ["Fashion"],
            "audience_geo": ["Mumbai"],
            "audience_age": ["18-24"],
            "audience_gender_mix": {"male": 40, "female": 58, "other": 2},
            "followers": 50000,
            "engagement_rate": 4.0,
            "content_quality": 4.0,
            "price_per_post": 20000,
            "platforms": ["Instagram"],
            "past_brands": [],
            "availability": True,
            "fraud_risk": 0.1,
            "brand_safety": 0.8,
        }
        data.update(overrides)
        return Influencer.model_validate(data)

    return _make


@pytest.fixture
def fashion_campaign() -> BrandCampaign:
    """The Fashion/Mumbai campaign used in the end-to-end example."""
    return BrandCampaign(
        id="camp-fashion",
        brand_name="Fashion Co",
        categories=["Fashion"],
        target_geo=["Mumbai"],
        min_followers=10000,
        min_engagement=3,
        max_price=50000,
        brand_safety_min=0.5,
        exclusions=[],
    )


@pytest.fixture
def example_influencer() -> Influencer:
    return Influencer(
        id="inf-example",
        handle="@example",
        niches=["Fashion"],
        audience_geo=["Mumbai"],
        followers=50000,
        engagement_rate=5,
        price_per_post=20000,
        brand_safety=0.8,
        fraud_risk=0.1,
        content_quality=4,
        platforms=[],
        past_brands=[],
        availability=True,
        audience_age=[],
        audience_gender_mix=GenderMix(male=50, female=50, other=0),
    )


@pytest.fixture
def make_pool(make_influencer) -> Callable[[int], List[Influencer]]:
    """Pool of n eligible influencers with varied niches, geo, and engagement."""
    niches = ["Fashion", "Beauty", "Lifestyle", "Fitness", "Travel"]
    geos = ["Mumbai", "Delhi", "Pune", "Chennai"]

    def _pool(n: int) -> List[Influencer]:
        return [
            make_influencer(
                id=f"inf-{i:03d}",
                niches=[niches[i % len(niches)]],
                audience_geo=[geos[i % len(geos)]],
                engagement_rate=3.0 + (i % 7) * 0.5,
                price_per_post=5000 + i * 1000,
            )
            for i in range(n)
        ]

    return _pool


@pytest.fixture
def no_explore_config() -> MatchmakerConfig:
    return MatchmakerConfig(exploration_enabled=False)


@pytest.fixture
def make_batcher(fashion_campaign):
    """Build a SessionBatcher over an in-memory pool and log."""

    def _make(pool, draw: float = NEVER_EXPLORE, config=None, seed_interactions=None):
        repo = InMemoryCandidateRepository(pool, [fashion_campaign])
        store = InMemoryInteractionStore(seed_interactions)
        return SessionBatcher(
            repo,
            store,
            config=config,
            rng=FixedDrawRandom(draw),
            seed_interactions=seed_interactions,
        )

    return _make


@pytest.fixture
def fixed_draw() -> Callable[..., FixedDrawRandom]:
    """Build a random source with a pinned uniform draw."""
    return FixedDrawRandom
