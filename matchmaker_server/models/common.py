"""Common Pydantic models shared across routes."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel


class MatchCard(BaseModel):
    id: str
    candidate_id: str
    handle: str
    score: float
    rationale: List[str] = []
    factors: Dict[str, float] = {}
    niches: List[str] = []
    audience_geo: List[str] = []
    platforms: List[str] = []
    followers: Optional[int] = None
    engagement_rate: Optional[float] = None
    price_per_post: Optional[float] = None
    queue_position: Optional[int] = None


class InteractionRecord(BaseModel):
    actor_id: str
    target_id: str
    type: str
    timestamp: datetime
