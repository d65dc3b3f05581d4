"""
Feedback Weight Adaptation Tests

Run:
----
    pytest tests/test_feedback.py -v
"""

from matchmaker.models import DEFAULT_WEIGHTS, Interaction, InteractionType, MatchmakerConfig, ScoringWeights
from matchmaker.stages import adapt_weights, recent_positive_interactions


def _history(*types):
    return [
        Interaction(actor_id="brand-1", target_id=f"inf-{i}", type=t)
        for i, t in enumerate(types)
    ]


LIKE = InteractionType.LIKE
SUPER = InteractionType.SUPERLIKE
PASS = InteractionType.PASS


class TestRecentPositives:

    def test_only_likes_and_superlikes(self):
        recent = recent_positive_interactions(_history(LIKE, PASS, SUPER, PASS))
        assert [i.type for i in recent] == [LIKE, SUPER]

    def test_window_keeps_most_recent(self):
        history = _history(*([LIKE] * 15))
        recent = recent_positive_interactions(history)
        assert len(recent) == 10
        assert recent[0].target_id == "inf-5"
        assert recent[-1].target_id == "inf-14"

    def test_zero_window(self):
        config = MatchmakerConfig(feedback_window=0)
        assert recent_positive_interactions(_history(LIKE, LIKE), config) == []


class TestAdaptWeights:

    def test_empty_history_returns_defaults(self):
        assert adapt_weights([]) == DEFAULT_WEIGHTS

    def test_below_threshold_returns_defaults(self):
        weights = adapt_weights(_history(LIKE, SUPER, PASS, PASS, PASS))
        assert weights == DEFAULT_WEIGHTS

    def test_at_threshold_weights_unchanged(self):
        weights = adapt_weights(_history(LIKE, LIKE, SUPER))
        assert weights.as_dict() == DEFAULT_WEIGHTS.as_dict()

    def test_passes_never_count(self):
        assert adapt_weights(_history(*([PASS] * 20))) == DEFAULT_WEIGHTS

    def test_caller_weights_returned(self):
        custom = ScoringWeights(geo_affinity=0.30, niche_overlap=0.10)
        assert adapt_weights(_history(LIKE), custom) is custom
        assert adapt_weights(_history(LIKE, LIKE, LIKE, LIKE), custom) is custom
