"""
Per-factor fit scores for one influencer against one campaign.

Every positive factor is in [0, 1]. The two penalty entries hold the raw
penalty magnitudes (fraud risk, brand-safety shortfall); the caller subtracts
them with their weights.
"""

from typing import Dict, List

from ...models.campaign import BrandCampaign
from ...models.config import MatchmakerConfig
from ...models.influencer import GenderMix, Influencer
from ...utils.normalize import clamp, exact_overlap_ratio, fuzzy_overlap_ratio, normalize


def niche_overlap(niches: List[str], categories: List[str]) -> float:
    return fuzzy_overlap_ratio(niches, categories)


def geo_affinity(audience_geo: List[str], target_geo: List[str]) -> float:
    return exact_overlap_ratio(audience_geo, target_geo)


def gender_similarity(audience: GenderMix, target: GenderMix) -> float:
    """1 minus the total absolute percentage gap, over its maximum of 200."""
    gap = (
        abs(audience.male - target.male)
        + abs(audience.female - target.female)
        + abs(audience.other - target.other)
    )
    return clamp(1 - gap / 200)


def age_gender_affinity(influencer: Influencer, campaign: BrandCampaign) -> float:
    """Mean of age-bracket overlap and gender-mix similarity."""
    age_score = exact_overlap_ratio(influencer.audience_age, campaign.target_age)
    gender_score = gender_similarity(influencer.audience_gender_mix, campaign.target_gender_mix)
    return (age_score + gender_score) / 2


def price_fit(price_per_post: float, max_price: float) -> float:
    if max_price <= 0:
        return 0.0
    return max(0.0, 1 - price_per_post / max_price)


def platform_fit(
    platforms: List[str],
    preferred_platforms: List[str],
    no_preference: float = 0.5,
) -> float:
    """Share of the campaign's preferred platforms the influencer is on."""
    if not preferred_platforms:
        return no_preference
    available = set(platforms)
    return sum(1 for p in preferred_platforms if p in available) / len(preferred_platforms)


def past_brand_similarity(
    past_brands: List[str],
    categories: List[str],
    saturation: int = 3,
) -> float:
    """Brands whose name contains a campaign category keyword, saturating at `saturation` matches."""
    keywords = [c.lower() for c in categories]
    relevant = sum(
        1 for brand in past_brands
        if any(k in brand.lower() for k in keywords)
    )
    return min(1.0, relevant / max(saturation, 1))


def brand_safety_gap(brand_safety: float, brand_safety_min: float) -> float:
    return max(0.0, brand_safety_min - brand_safety)


def compute_factors(
    influencer: Influencer,
    campaign: BrandCampaign,
    config: MatchmakerConfig,
) -> Dict[str, float]:
    """All eleven factor values, keyed by the ScoringWeights field names."""
    return {
        "niche_overlap": niche_overlap(influencer.niches, campaign.categories),
        "geo_affinity": geo_affinity(influencer.audience_geo, campaign.target_geo),
        "age_gender_affinity": age_gender_affinity(influencer, campaign),
        "engagement_norm": normalize(
            influencer.engagement_rate,
            config.engagement_range_min,
            config.engagement_range_max,
        ),
        "content_quality": normalize(
            influencer.content_quality,
            config.content_quality_min,
            config.content_quality_max,
        ),
        "price_fit": price_fit(influencer.price_per_post, campaign.max_price),
        "platform_fit": platform_fit(
            influencer.platforms,
            campaign.preferred_platforms,
            config.no_platform_preference_fit,
        ),
        "past_brand_similarity": past_brand_similarity(
            influencer.past_brands,
            campaign.categories,
            config.past_brand_saturation,
        ),
        "availability_fit": 1.0 if influencer.availability else 0.0,
        "fraud_risk_penalty": influencer.fraud_risk,
        "brand_safety_penalty": brand_safety_gap(
            influencer.brand_safety, campaign.brand_safety_min
        ),
    }
