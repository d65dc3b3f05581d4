"""
Pipeline orchestrator — match filters, hard filters, scoring, diversity, exploration.

The main entry point is rank_candidates, which returns the full ranked list
for one request. Paging and exposure tracking live with the caller.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Union

from ..models.campaign import BrandCampaign, ensure_campaign
from ..models.config import MatchmakerConfig, resolve_config
from ..models.filters import MatchFilters
from ..models.influencer import Influencer, ensure_influencers
from ..models.interaction import Interaction, ensure_interactions
from ..models.scoring import ScoredCandidate
from ..models.weights import ScoringWeights
from .candidate_pool import apply_match_filters
from .diversity import BRAND_ROLE, apply_diversity_reranking
from .exploration import apply_exploration
from .feedback import adapt_weights
from .hard_filter import get_eligible
from .scoring import score_candidates

logger = logging.getLogger(__name__)

FALLBACK_RATIONALE = "Candidate match"


def _fallback_ranking(
    candidates: List[Influencer],
    config: MatchmakerConfig,
) -> List[ScoredCandidate]:
    """Uniform score for every candidate; used when there is no campaign to score against."""
    return [
        ScoredCandidate(
            candidate=c,
            score=config.fallback_score,
            rationale=[FALLBACK_RATIONALE],
        )
        for c in candidates
    ]


def rank_candidates(
    role: str,
    campaign: Optional[Union[BrandCampaign, Dict[str, Any]]],
    candidates: List[Union[Influencer, Dict[str, Any]]],
    interactions: List[Union[Interaction, Dict[str, Any]]],
    filters: Optional[MatchFilters] = None,
    config: Optional[MatchmakerConfig] = None,
    rng: Optional[random.Random] = None,
    weights: Optional[ScoringWeights] = None,
) -> List[ScoredCandidate]:
    """
    Rank the candidate pool for one actor.

    Brand role with a campaign: match filters → hard filters → weighted scoring
    (weights from feedback adaptation) → sort → diversity → exploration.
    Any other request: every candidate at the fallback score, unfiltered.

    Returns:
        Ranked list of ScoredCandidate (desc, exploration items at the tail).
    """
    config = resolve_config(config)
    pool = ensure_influencers(candidates)
    campaign_typed = ensure_campaign(campaign)
    history = ensure_interactions(interactions)

    if campaign_typed is None or role != BRAND_ROLE:
        logger.info(
            "[ranking] FALLBACK role=%s has_campaign=%s candidates=%s",
            role, campaign_typed is not None, len(pool),
        )
        return _fallback_ranking(pool, config)

    # 1) User filters, then hard eligibility
    narrowed = apply_match_filters(pool, filters)
    eligible = get_eligible(narrowed, campaign_typed)

    # 2) Weights for this actor, then score and sort
    actor_weights = adapt_weights(history, weights, config)
    scored = score_candidates(eligible, campaign_typed, actor_weights, config)

    # 3) Diversity re-ranking
    if config.diversity_enabled:
        scored = apply_diversity_reranking(scored, role, config)

    # 4) Exploration draws from the whole hard-filter-eligible pool
    unfiltered = filters is None or filters.is_empty
    exploration_pool = eligible if unfiltered else get_eligible(pool, campaign_typed)
    ranked = apply_exploration(scored, exploration_pool, len(history), rng, config)

    logger.info(
        "[ranking] RANKED pool=%s narrowed=%s eligible=%s ranked=%s",
        len(pool), len(narrowed), len(eligible), len(ranked),
    )
    return ranked
