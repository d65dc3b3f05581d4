"""
Influencer model — the creator-side candidate profile.

Immutable within a ranking pass. Built from repository dicts via
Influencer.model_validate(d) or ensure_influencers().
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field


class GenderMix(BaseModel):
    """Audience (or target) gender split in percent; the three parts sum to 100."""

    model_config = ConfigDict(frozen=True)

    male: float = 0.0
    female: float = 0.0
    other: float = 0.0


class Influencer(BaseModel):
    """
    Creator profile as seen by the matching engine.

    engagement_rate is a percentage (e.g. 4.2 means 4.2%).
    fraud_risk and brand_safety are in [0, 1]; higher brand_safety is safer.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    handle: str = ""
    niches: List[str] = Field(default_factory=list)
    audience_geo: List[str] = Field(default_factory=list)
    audience_age: List[str] = Field(default_factory=list)
    audience_gender_mix: GenderMix = Field(default_factory=GenderMix)
    followers: int = Field(default=0, ge=0)
    engagement_rate: float = Field(default=0.0, ge=0)
    content_quality: float = 1.0
    price_per_post: float = Field(default=0.0, ge=0)
    platforms: List[str] = Field(default_factory=list)
    past_brands: List[str] = Field(default_factory=list)
    availability: bool = True
    fraud_risk: float = Field(default=0.0, ge=0, le=1)
    brand_safety: float = Field(default=1.0, ge=0, le=1)


def ensure_influencers(
    items: List[Union[Dict[str, Any], "Influencer"]],
) -> List["Influencer"]:
    """Convert list of dicts or Influencers to list of Influencer models for the pipeline."""
    return [
        Influencer.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
