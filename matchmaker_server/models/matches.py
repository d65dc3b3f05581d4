"""Match feed request/response models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from matchmaker.models import BrandCampaign, MatchFilters
from matchmaker.stages import BRAND_ROLE, ROLES

from .common import MatchCard


class BatchRequest(BaseModel):
    actor_id: str
    role: str = BRAND_ROLE
    # Either a full campaign or the id of a known one
    campaign: Optional[BrandCampaign] = None
    campaign_id: Optional[str] = None
    cursor: int = Field(default=0, ge=0)
    filters: MatchFilters = MatchFilters()
    page_size: int = Field(default=10, ge=1, le=50)

    @field_validator("role")
    @classmethod
    def role_is_known(cls, v: str) -> str:
        if v not in ROLES:
            raise ValueError(f"role must be one of {', '.join(ROLES)}")
        return v


class BatchResponse(BaseModel):
    page: List[MatchCard]
    next_cursor: int
    has_more: bool
