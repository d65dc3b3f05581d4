"""
Scoring model — ScoredCandidate, the unit produced by every ranking stage.

Built fresh per ranking pass; never persisted.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .campaign import BrandCampaign
from .influencer import Influencer

# Separates a canonical candidate id from its per-exposure suffix in cycling feeds.
EXPOSURE_SEPARATOR = "::"


def canonical_id(target_id: str) -> str:
    """Strip an exposure suffix (if any) and return the canonical candidate id."""
    return target_id.split(EXPOSURE_SEPARATOR, 1)[0]


def exposure_id_for(candidate_id: str, exposure_index: int) -> str:
    """Per-exposure identity for the same profile shown again in a cycling feed."""
    return f"{candidate_id}{EXPOSURE_SEPARATOR}{exposure_index}"


class ScoredCandidate(BaseModel):
    """
    A candidate with its fit score and explanation.

    score: final score in [0, 1] (after diversity adjustment when applied).
    rationale: human-readable reasons, in factor order; explanation only.
    factors: per-factor sub-scores, for debugging.
    exposure_id: set only by the exposure-cycling feed.
    """

    candidate: Union[Influencer, BrandCampaign]
    score: float
    rationale: List[str] = Field(default_factory=list)
    factors: Dict[str, float] = Field(default_factory=dict)
    exposure_id: Optional[str] = None

    @property
    def canonical_id(self) -> str:
        return self.candidate.id

    @property
    def id(self) -> str:
        """Identity key for downstream consumers: exposure id when cycling, else canonical id."""
        return self.exposure_id or self.candidate.id
