"""Interaction request/response models."""

from typing import List

from pydantic import BaseModel

from .common import InteractionRecord


class InteractionRequest(BaseModel):
    actor_id: str
    target_id: str
    # Validated by the batcher so unknown types are reported, not coerced
    type: str


class SwipeRequest(BaseModel):
    actor_id: str
    target_id: str
    direction: str  # left | right | up


class InteractionsResponse(BaseModel):
    actor_id: str
    interactions: List[InteractionRecord]
