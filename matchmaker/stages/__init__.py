"""Pipeline stages: match filters, hard filters, scoring, diversity, exploration, feedback."""

from .candidate_pool import apply_match_filters
from .diversity import BRAND_ROLE, CREATOR_ROLE, ROLES, TagSets, apply_diversity_reranking, resolve_tag_sets
from .exploration import NOVEL_RATIONALE, apply_exploration, current_epsilon
from .feedback import adapt_weights, recent_positive_interactions
from .hard_filter import FilterResult, apply_hard_filters, get_eligible
from .orchestrator import FALLBACK_RATIONALE, rank_candidates
from .scoring import score_candidate, score_candidates

__all__ = [
    "BRAND_ROLE",
    "CREATOR_ROLE",
    "FALLBACK_RATIONALE",
    "NOVEL_RATIONALE",
    "ROLES",
    "FilterResult",
    "TagSets",
    "adapt_weights",
    "apply_diversity_reranking",
    "apply_exploration",
    "apply_hard_filters",
    "apply_match_filters",
    "current_epsilon",
    "get_eligible",
    "rank_candidates",
    "recent_positive_interactions",
    "resolve_tag_sets",
    "score_candidate",
    "score_candidates",
]
