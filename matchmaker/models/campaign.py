"""
BrandCampaign model — the brand-side request that candidates are ranked against.

One active campaign per ranking request.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .influencer import GenderMix


class BrandCampaign(BaseModel):
    """
    Campaign targeting and eligibility thresholds.

    min_* / max_price / brand_safety_min drive the hard filters;
    the remaining fields feed the fit score.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = ""
    brand_name: str = ""
    categories: List[str] = Field(default_factory=list)
    target_geo: List[str] = Field(default_factory=list)
    target_age: List[str] = Field(default_factory=list)
    target_gender_mix: GenderMix = Field(default_factory=GenderMix)
    min_followers: int = 0
    min_engagement: float = 0.0
    brand_safety_min: float = Field(default=0.0, ge=0, le=1)
    # Required; there is no default budget.
    max_price: float = Field(ge=0)
    preferred_platforms: List[str] = Field(default_factory=list)
    exclusions: List[str] = Field(default_factory=list)


def ensure_campaign(
    campaign: Optional[Union[Dict[str, Any], "BrandCampaign"]],
) -> Optional["BrandCampaign"]:
    """Convert a campaign dict to BrandCampaign; None passes through."""
    if campaign is None:
        return None
    return BrandCampaign.model_validate(campaign) if isinstance(campaign, dict) else campaign
