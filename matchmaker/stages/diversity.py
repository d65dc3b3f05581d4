"""
Diversity re-ranking — soft penalties for over-represented niche/geo tags.

Single left-to-right pass over a score-sorted list. For each candidate, every
tag whose running share among already-emitted candidates exceeds the threshold
multiplies the candidate's penalty factor (niche 0.8, geo 0.85 by default).
Counters are updated after the candidate is emitted. The list is re-sorted by
adjusted score at the end.
"""

from typing import Dict, List, NamedTuple, Sequence, Union

from ..models.campaign import BrandCampaign
from ..models.config import DEFAULT_CONFIG, MatchmakerConfig
from ..models.influencer import Influencer
from ..models.scoring import ScoredCandidate

BRAND_ROLE = "brand"
CREATOR_ROLE = "creator"
ROLES = (BRAND_ROLE, CREATOR_ROLE)


class TagSets(NamedTuple):
    """Cluster keys for one item: primary (niches/categories) and secondary (geo)."""

    primary: Sequence[str]
    secondary: Sequence[str]


def resolve_tag_sets(item: Union[Influencer, BrandCampaign], role: str) -> TagSets:
    """
    Cluster keys for an item given the viewer's role.

    A brand browses creators, so items carry niches and audience geography;
    a creator browses campaigns, so items carry categories and target geography.
    Items of the other kind contribute no tags.
    """
    if role == BRAND_ROLE and isinstance(item, Influencer):
        return TagSets(item.niches, item.audience_geo)
    if role == CREATOR_ROLE and isinstance(item, BrandCampaign):
        return TagSets(item.categories, item.target_geo)
    return TagSets((), ())


def _penalty_for(
    tags: Sequence[str],
    counts: Dict[str, int],
    emitted: int,
    threshold: float,
    penalty: float,
) -> float:
    factor = 1.0
    for tag in tags:
        if counts.get(tag, 0) / (emitted + 1) > threshold:
            factor *= penalty
    return factor


def apply_diversity_reranking(
    scored: List[ScoredCandidate],
    role: str = BRAND_ROLE,
    config: MatchmakerConfig = DEFAULT_CONFIG,
) -> List[ScoredCandidate]:
    """
    Penalize candidates whose tags dominate the items ranked above them.

    Args:
        scored: Candidates sorted by score (desc). Not mutated.
        role: Viewer role, selects which tag sets are cluster keys.
        config: Threshold and per-kind penalty factors.

    Returns:
        New list of ScoredCandidates with adjusted scores, sorted descending.
    """
    result: List[ScoredCandidate] = []
    primary_counts: Dict[str, int] = {}
    secondary_counts: Dict[str, int] = {}

    for candidate in scored:
        tags = resolve_tag_sets(candidate.candidate, role)
        emitted = len(result)

        factor = _penalty_for(
            tags.primary, primary_counts, emitted,
            config.diversity_share_threshold, config.niche_penalty,
        )
        factor *= _penalty_for(
            tags.secondary, secondary_counts, emitted,
            config.diversity_share_threshold, config.geo_penalty,
        )

        if factor < 1.0:
            result.append(candidate.model_copy(update={"score": candidate.score * factor}))
        else:
            result.append(candidate)

        for tag in tags.primary:
            primary_counts[tag] = primary_counts.get(tag, 0) + 1
        for tag in tags.secondary:
            secondary_counts[tag] = secondary_counts.get(tag, 0) + 1

    result.sort(key=lambda s: s.score, reverse=True)
    return result
