"""
Epsilon-greedy exploration — swap the tail of the ranking for unseen candidates.

epsilon = initial_epsilon * epsilon_decay ** (interaction_count / decay_interval)

One draw per ranking pass. When it lands below epsilon and the eligible pool
holds candidates absent from the ranking, ceil(fraction * len(ranking)) of
them (random order) replace the same number of lowest-ranked items, with a
neutral score. The random source is injected so tests can pin the outcome.
"""

import logging
import math
import random
from typing import List, Optional

from ..models.config import DEFAULT_CONFIG, MatchmakerConfig
from ..models.influencer import Influencer
from ..models.scoring import ScoredCandidate

logger = logging.getLogger(__name__)

NOVEL_RATIONALE = "Novel suggestion for exploration"


def current_epsilon(
    interaction_count: int,
    config: MatchmakerConfig = DEFAULT_CONFIG,
) -> float:
    """Exploration probability, decaying with the actor's interaction history length."""
    return config.initial_epsilon * math.pow(
        config.epsilon_decay, interaction_count / config.epsilon_decay_interval
    )


def apply_exploration(
    scored: List[ScoredCandidate],
    pool: List[Influencer],
    interaction_count: int,
    rng: Optional[random.Random] = None,
    config: MatchmakerConfig = DEFAULT_CONFIG,
) -> List[ScoredCandidate]:
    """
    Maybe replace the lowest-ranked items with novel candidates from pool.

    Args:
        scored: Ranked list (desc). Not mutated.
        pool: Eligible candidates to draw novel items from.
        interaction_count: Length of the actor's full interaction history.
        rng: Random source for the coin flip and the shuffle.

    Returns:
        The same list when exploration is not triggered, else a new list.
    """
    if not config.exploration_enabled:
        return scored
    rng = rng if rng is not None else random.Random()

    epsilon = current_epsilon(interaction_count, config)
    if rng.random() >= epsilon:
        return scored

    ranked_ids = {s.canonical_id for s in scored}
    unseen = [c for c in pool if c.id not in ranked_ids]
    if not unseen:
        return scored

    novel_count = min(math.ceil(config.exploration_fraction * len(scored)), len(unseen))
    if novel_count == 0:
        return scored

    rng.shuffle(unseen)
    novel = [
        ScoredCandidate(
            candidate=c,
            score=config.novel_score,
            rationale=[NOVEL_RATIONALE],
        )
        for c in unseen[:novel_count]
    ]
    logger.info(
        "[exploration] INJECTED novel=%s ranked=%s epsilon=%.4f",
        novel_count, len(scored), epsilon,
    )
    return scored[: len(scored) - novel_count] + novel
