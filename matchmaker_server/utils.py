"""Pure helpers: match card and interaction record formatting."""

from typing import List

from matchmaker.models import Influencer, Interaction, ScoredCandidate

from .models import InteractionRecord, MatchCard


def to_match_card(scored: ScoredCandidate, position: int) -> MatchCard:
    """Format a ScoredCandidate for the API (position is 1-based within the feed)."""
    item = scored.candidate
    card = MatchCard(
        id=scored.id,
        candidate_id=scored.canonical_id,
        handle=getattr(item, "handle", "") or getattr(item, "brand_name", ""),
        score=round(scored.score, 4),
        rationale=list(scored.rationale),
        factors={k: round(v, 4) for k, v in scored.factors.items()},
        queue_position=position,
    )
    if isinstance(item, Influencer):
        card.niches = list(item.niches)
        card.audience_geo = list(item.audience_geo)
        card.platforms = list(item.platforms)
        card.followers = item.followers
        card.engagement_rate = item.engagement_rate
        card.price_per_post = item.price_per_post
    return card


def to_match_cards(page: List[ScoredCandidate], cursor: int) -> List[MatchCard]:
    return [to_match_card(scored, cursor + i + 1) for i, scored in enumerate(page)]


def to_interaction_record(interaction: Interaction) -> InteractionRecord:
    return InteractionRecord(
        actor_id=interaction.actor_id,
        target_id=interaction.target_id,
        type=interaction.type.value,
        timestamp=interaction.timestamp,
    )
