"""Exceptions raised by the matching core."""


class MatchmakerError(Exception):
    """Base class for matching engine errors."""


class InvalidInteractionError(MatchmakerError, ValueError):
    """Raised when an interaction type is not one of like, superlike, pass."""

    def __init__(self, interaction_type: object):
        self.interaction_type = interaction_type
        super().__init__(
            f"Unknown interaction type {interaction_type!r}; expected one of like, superlike, pass"
        )
