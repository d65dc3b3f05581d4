"""
Candidate pool: narrow the raw pool with the user's MatchFilters.

Each set filter field is an independent predicate; a candidate must pass all
of them. Runs before hard filtering and scoring.

The public entry point is apply_match_filters.
"""

from typing import List, Optional

from ..models.filters import MatchFilters
from ..models.influencer import Influencer


def _any_in(values: List[str], allowed: Optional[List[str]]) -> bool:
    """True when the filter is unset/empty, or any value is in the allowed list."""
    if not allowed:
        return True
    return any(v in allowed for v in values)


def _passes_match_filters(influencer: Influencer, filters: MatchFilters) -> bool:
    if not _any_in(influencer.platforms, filters.platforms):
        return False
    if not _any_in(influencer.niches, filters.niches):
        return False
    if not _any_in(influencer.audience_geo, filters.geo):
        return False
    if filters.min_engagement is not None and influencer.engagement_rate < filters.min_engagement:
        return False
    if filters.max_price is not None and influencer.price_per_post > filters.max_price:
        return False
    if filters.min_followers is not None and influencer.followers < filters.min_followers:
        return False
    return True


def apply_match_filters(
    candidates: List[Influencer],
    filters: Optional[MatchFilters] = None,
) -> List[Influencer]:
    """Return candidates satisfying every set field of filters (all of them when None)."""
    if filters is None or filters.is_empty:
        return list(candidates)
    return [c for c in candidates if _passes_match_filters(c, filters)]
