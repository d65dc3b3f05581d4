"""
Feedback weight adaptation from an actor's interaction history.

Looks at the most recent positive interactions (like, superlike). Below the
evidence threshold the defaults are returned untouched. At or above it the
weights are also returned unchanged: there is no reweighting rule yet.
"""

import logging
from typing import List, Optional

from ..models.config import DEFAULT_CONFIG, MatchmakerConfig
from ..models.interaction import Interaction
from ..models.weights import ScoringWeights

logger = logging.getLogger(__name__)


def recent_positive_interactions(
    interactions: List[Interaction],
    config: MatchmakerConfig = DEFAULT_CONFIG,
) -> List[Interaction]:
    """Last feedback_window likes/superlikes, in log order."""
    positives = [i for i in interactions if i.type.is_positive]
    return positives[-config.feedback_window:] if config.feedback_window > 0 else []


def adapt_weights(
    interactions: List[Interaction],
    weights: Optional[ScoringWeights] = None,
    config: MatchmakerConfig = DEFAULT_CONFIG,
) -> ScoringWeights:
    """Scoring weights for this actor."""
    weights = weights if weights is not None else config.weights
    recent = recent_positive_interactions(interactions, config)
    if len(recent) < config.feedback_min_positive:
        return weights
    # TODO: shift weight toward the factors shared by recently liked candidates.
    logger.debug("[feedback] THRESHOLD_MET positives=%s weights unchanged", len(recent))
    return weights
