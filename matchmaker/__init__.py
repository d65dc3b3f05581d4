"""
Matchmaker — two-sided brand/creator matching core.

Single entry point for the matching package:
- models/: MatchmakerConfig, ScoringWeights, Influencer, BrandCampaign, Interaction,
  MatchFilters, ScoredCandidate, SessionState
- stages/: hard_filter, candidate_pool, scoring, diversity, exploration, feedback, orchestrator
- utils/: normalize and overlap ratios
"""

from .errors import InvalidInteractionError, MatchmakerError
from .models import (
    DEFAULT_CONFIG,
    DEFAULT_WEIGHTS,
    BrandCampaign,
    GenderMix,
    Influencer,
    Interaction,
    InteractionType,
    MatchFilters,
    MatchmakerConfig,
    ScoredCandidate,
    ScoringWeights,
    SessionState,
    canonical_id,
    exposure_id_for,
    parse_interaction_type,
)
from .stages import (
    BRAND_ROLE,
    CREATOR_ROLE,
    apply_diversity_reranking,
    apply_exploration,
    apply_hard_filters,
    current_epsilon,
    rank_candidates,
    score_candidate,
)

__all__ = [
    "BRAND_ROLE",
    "CREATOR_ROLE",
    "DEFAULT_CONFIG",
    "DEFAULT_WEIGHTS",
    "BrandCampaign",
    "GenderMix",
    "Influencer",
    "Interaction",
    "InteractionType",
    "InvalidInteractionError",
    "MatchFilters",
    "MatchmakerConfig",
    "MatchmakerError",
    "ScoredCandidate",
    "ScoringWeights",
    "SessionState",
    "apply_diversity_reranking",
    "apply_exploration",
    "apply_hard_filters",
    "canonical_id",
    "current_epsilon",
    "exposure_id_for",
    "parse_interaction_type",
    "rank_candidates",
    "score_candidate",
]
