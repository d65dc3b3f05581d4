"""
Session model — per-actor feed state: cursor, materialized ranking, and exposure set.

The three parts are only ever cleared together through reset().
"""

from typing import List, Optional, Set

from pydantic import BaseModel, Field

from .scoring import ScoredCandidate


class SessionState(BaseModel):
    """Feed state for one actor."""

    actor_id: str
    # Identifies the role/campaign/filters the ranking was built for.
    ranking_key: Optional[str] = None
    cursor: int = 0
    ranked: Optional[List[ScoredCandidate]] = None
    exposed_ids: Set[str] = Field(default_factory=set)

    def reset(self, ranking_key: Optional[str] = None) -> None:
        """Clear cursor, ranking, and exposure set as one unit."""
        self.ranking_key = ranking_key
        self.cursor = 0
        self.ranked = None
        self.exposed_ids = set()

    @property
    def is_materialized(self) -> bool:
        return self.ranked is not None
