"""Pydantic request/response models for the API."""

from .common import InteractionRecord, MatchCard
from .interactions import InteractionRequest, InteractionsResponse, SwipeRequest
from .matches import BatchRequest, BatchResponse
from .sessions import ResetSessionRequest

__all__ = [
    "BatchRequest",
    "BatchResponse",
    "InteractionRecord",
    "InteractionRequest",
    "InteractionsResponse",
    "MatchCard",
    "ResetSessionRequest",
    "SwipeRequest",
]
