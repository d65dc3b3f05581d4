"""
Main scoring orchestration: factor values, weighted blend, rationale.

final = sum(w * positive factor) - sum(w * penalty), clamped to [0, 1].
Submodules used: factors, rationale.
"""

import logging
from typing import Dict, List, Optional

from ...models.campaign import BrandCampaign
from ...models.config import DEFAULT_CONFIG, MatchmakerConfig
from ...models.influencer import Influencer
from ...models.scoring import ScoredCandidate
from ...models.weights import PENALTY_FACTORS, POSITIVE_FACTORS, ScoringWeights
from ...utils.normalize import clamp
from .factors import compute_factors
from .rationale import build_rationale

logger = logging.getLogger(__name__)


def blend_factors(factors: Dict[str, float], weights: ScoringWeights) -> float:
    """Weighted sum of positive factors minus weighted penalties, clamped to [0, 1]."""
    w = weights.as_dict()
    positive = sum(w[name] * factors[name] for name in POSITIVE_FACTORS)
    penalty = sum(w[name] * factors[name] for name in PENALTY_FACTORS)
    return clamp(positive - penalty)


def score_candidate(
    influencer: Influencer,
    campaign: BrandCampaign,
    weights: Optional[ScoringWeights] = None,
    config: MatchmakerConfig = DEFAULT_CONFIG,
) -> ScoredCandidate:
    """Score one hard-filter survivor against the campaign."""
    weights = weights if weights is not None else config.weights
    factors = compute_factors(influencer, campaign, config)
    return ScoredCandidate(
        candidate=influencer,
        score=blend_factors(factors, weights),
        rationale=build_rationale(influencer, factors, config),
        factors=factors,
    )


def score_candidates(
    candidates: List[Influencer],
    campaign: BrandCampaign,
    weights: Optional[ScoringWeights] = None,
    config: MatchmakerConfig = DEFAULT_CONFIG,
) -> List[ScoredCandidate]:
    """
    Score every candidate and sort by score (descending).

    The sort is stable, so equal scores keep their input order.
    """
    scored = [score_candidate(c, campaign, weights, config) for c in candidates]
    scored.sort(key=lambda s: s.score, reverse=True)
    if scored:
        logger.debug(
            "[scoring] SCORED count=%s top=%.3f bottom=%.3f",
            len(scored), scored[0].score, scored[-1].score,
        )
    return scored
