"""
Hard filters: non-negotiable eligibility gates for a candidate under a campaign.

Checks run in a fixed order and stop at the first failure: brand safety,
followers, engagement, price, exclusion list. The reason is for diagnostics
only; a failing candidate is dropped from the pass entirely.
"""

import logging
from typing import List, NamedTuple, Optional

from ..models.campaign import BrandCampaign
from ..models.influencer import Influencer

logger = logging.getLogger(__name__)


class FilterResult(NamedTuple):
    passed: bool
    reason: Optional[str] = None


PASSED = FilterResult(True)


def _brand_safety_ok(influencer: Influencer, campaign: BrandCampaign) -> bool:
    return influencer.brand_safety >= campaign.brand_safety_min


def _followers_ok(influencer: Influencer, campaign: BrandCampaign) -> bool:
    return influencer.followers >= campaign.min_followers


def _engagement_ok(influencer: Influencer, campaign: BrandCampaign) -> bool:
    return influencer.engagement_rate >= campaign.min_engagement


def _price_ok(influencer: Influencer, campaign: BrandCampaign) -> bool:
    return influencer.price_per_post <= campaign.max_price


def _not_excluded(influencer: Influencer, campaign: BrandCampaign) -> bool:
    return influencer.handle not in campaign.exclusions


_CHECKS = (
    (_brand_safety_ok, "Brand safety below minimum"),
    (_followers_ok, "Follower count below minimum"),
    (_engagement_ok, "Engagement rate below minimum"),
    (_price_ok, "Price exceeds budget"),
    (_not_excluded, "In exclusion list"),
)


def apply_hard_filters(influencer: Influencer, campaign: BrandCampaign) -> FilterResult:
    """Return PASSED, or a failing FilterResult naming the first check that failed."""
    for check, reason in _CHECKS:
        if not check(influencer, campaign):
            return FilterResult(False, reason)
    return PASSED


def get_eligible(
    candidates: List[Influencer],
    campaign: BrandCampaign,
) -> List[Influencer]:
    """Return candidates that pass every hard filter, in input order."""
    eligible = []
    for influencer in candidates:
        result = apply_hard_filters(influencer, campaign)
        if not result.passed:
            logger.debug(
                "[hard_filter] EXCLUDED id=%s handle=%s reason=%s",
                influencer.id, influencer.handle, result.reason,
            )
            continue
        eligible.append(influencer)
    return eligible
