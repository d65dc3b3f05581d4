"""Backing logic: candidate repository, interaction store, session batcher."""

from .candidate_repository import (
    CandidateRepository,
    InMemoryCandidateRepository,
    JsonCandidateRepository,
    load_seed_interactions,
)
from .interaction_store import InMemoryInteractionStore, InteractionStore, JsonInteractionStore
from .session_batcher import RankedBatch, SessionBatcher

__all__ = [
    "CandidateRepository",
    "InMemoryCandidateRepository",
    "JsonCandidateRepository",
    "load_seed_interactions",
    "InteractionStore",
    "InMemoryInteractionStore",
    "JsonInteractionStore",
    "RankedBatch",
    "SessionBatcher",
]
