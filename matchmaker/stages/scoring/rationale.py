"""
Human-readable match reasons (e.g. "Great price fit").

Used by the response as explanation metadata; never fed back into scoring.
"""

from typing import Dict, List

from ...models.config import MatchmakerConfig
from ...models.influencer import Influencer


def build_rationale(
    influencer: Influencer,
    factors: Dict[str, float],
    config: MatchmakerConfig,
) -> List[str]:
    """One sentence per factor that crosses its notable threshold, in factor order."""
    why = []
    niche = factors["niche_overlap"]
    if niche > config.niche_rationale_threshold:
        why.append(f"High niche overlap ({round(niche * 100)}%)")
    if factors["geo_affinity"] > config.geo_rationale_threshold:
        why.append(f"Strong geo match in {', '.join(influencer.audience_geo)}")
    if influencer.engagement_rate > config.engagement_rationale_threshold:
        why.append(f"Excellent engagement ({influencer.engagement_rate:g}%)")
    if influencer.content_quality >= config.content_quality_rationale_threshold:
        why.append("High content quality")
    if factors["price_fit"] > config.price_fit_rationale_threshold:
        why.append("Great price fit")
    if factors["platform_fit"] > config.platform_rationale_threshold:
        why.append("Perfect platform match")
    if factors["past_brand_similarity"] > config.past_brand_rationale_threshold:
        why.append("Relevant brand experience")
    if not influencer.availability:
        why.append("Currently unavailable")
    return why
