"""
Interaction model — one actor's feedback (like, superlike, pass) on a target.

The interaction log is append-only; the ordered history of one actor is the
user context used for exploration and weight adaptation.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors import InvalidInteractionError


class InteractionType(str, Enum):
    LIKE = "like"
    SUPERLIKE = "superlike"
    PASS = "pass"

    @property
    def is_positive(self) -> bool:
        return self in (InteractionType.LIKE, InteractionType.SUPERLIKE)


# Swipe gestures from the match deck
SWIPE_DIRECTIONS: Dict[str, InteractionType] = {
    "left": InteractionType.PASS,
    "right": InteractionType.LIKE,
    "up": InteractionType.SUPERLIKE,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Interaction(BaseModel):
    """
    A single feedback event.

    actor_id: who swiped. target_id: canonical candidate id (never an exposure id).
    timestamp: UTC time the event was appended.
    """

    model_config = ConfigDict(frozen=True)

    actor_id: str
    target_id: str
    type: InteractionType
    timestamp: datetime = Field(default_factory=_utcnow)


def parse_interaction_type(value: Union[str, InteractionType]) -> InteractionType:
    """Validate an interaction type; raises InvalidInteractionError for anything else."""
    if isinstance(value, InteractionType):
        return value
    try:
        return InteractionType(value)
    except ValueError:
        raise InvalidInteractionError(value) from None


def ensure_interactions(
    items: List[Union[Dict[str, Any], "Interaction"]],
) -> List["Interaction"]:
    """Convert list of dicts or Interactions to list of Interaction models."""
    return [
        Interaction.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
