"""
MatchFilters — optional constraints that narrow the pool before scoring.

A field left as None (or an empty list) means unconstrained.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class MatchFilters(BaseModel):
    """User-chosen narrowing of the candidate pool; each set field is an AND-ed predicate."""

    model_config = ConfigDict(frozen=True)

    platforms: Optional[List[str]] = None
    niches: Optional[List[str]] = None
    geo: Optional[List[str]] = None
    min_engagement: Optional[float] = None
    max_price: Optional[float] = None
    min_followers: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        if self.platforms or self.niches or self.geo:
            return False
        return (
            self.min_engagement is None
            and self.max_price is None
            and self.min_followers is None
        )

