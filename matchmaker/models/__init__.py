"""Data models for the matching pipeline."""

from .campaign import BrandCampaign, ensure_campaign
from .config import DEFAULT_CONFIG, MatchmakerConfig, resolve_config
from .filters import MatchFilters
from .influencer import GenderMix, Influencer, ensure_influencers
from .interaction import (
    SWIPE_DIRECTIONS,
    Interaction,
    InteractionType,
    ensure_interactions,
    parse_interaction_type,
)
from .scoring import ScoredCandidate, canonical_id, exposure_id_for
from .session import SessionState
from .weights import DEFAULT_WEIGHTS, FACTORS, ScoringWeights

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_WEIGHTS",
    "FACTORS",
    "SWIPE_DIRECTIONS",
    "BrandCampaign",
    "GenderMix",
    "Influencer",
    "Interaction",
    "InteractionType",
    "MatchFilters",
    "MatchmakerConfig",
    "ScoredCandidate",
    "ScoringWeights",
    "SessionState",
    "canonical_id",
    "ensure_campaign",
    "ensure_influencers",
    "ensure_interactions",
    "exposure_id_for",
    "parse_interaction_type",
    "resolve_config",
]
