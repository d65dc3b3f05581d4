"""
Scoring weights — one coefficient per scoring factor.

The key set is fixed: unknown keys are rejected at construction so a scoring
pass can never reference an unlisted factor. The default positive weights sum
to about 1.0 (0.98); the two penalty weights are extra subtractive terms.
"""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

POSITIVE_FACTORS: Tuple[str, ...] = (
    "niche_overlap",
    "geo_affinity",
    "age_gender_affinity",
    "engagement_norm",
    "content_quality",
    "price_fit",
    "platform_fit",
    "past_brand_similarity",
    "availability_fit",
)

PENALTY_FACTORS: Tuple[str, ...] = (
    "fraud_risk_penalty",
    "brand_safety_penalty",
)

FACTORS: Tuple[str, ...] = POSITIVE_FACTORS + PENALTY_FACTORS


class ScoringWeights(BaseModel):
    """Named, non-negative coefficients for the eleven scoring factors."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    niche_overlap: float = Field(default=0.22, ge=0)
    geo_affinity: float = Field(default=0.18, ge=0)
    age_gender_affinity: float = Field(default=0.12, ge=0)
    engagement_norm: float = Field(default=0.14, ge=0)
    content_quality: float = Field(default=0.10, ge=0)
    price_fit: float = Field(default=0.10, ge=0)
    platform_fit: float = Field(default=0.06, ge=0)
    past_brand_similarity: float = Field(default=0.04, ge=0)
    availability_fit: float = Field(default=0.02, ge=0)

    # Penalties (subtracted)
    fraud_risk_penalty: float = Field(default=0.06, ge=0)
    brand_safety_penalty: float = Field(default=0.06, ge=0)

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in FACTORS}


DEFAULT_WEIGHTS = ScoringWeights()
