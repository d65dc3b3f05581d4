"""
Exploration Tests

Epsilon decay and tail substitution with novel candidates. The random source
is pinned through a fixed-draw Random so the coin flip is deterministic.

Run:
----
    pytest tests/test_exploration.py -v
"""

import math

import pytest

from matchmaker.models import MatchmakerConfig
from matchmaker.stages import (
    NOVEL_RATIONALE,
    apply_exploration,
    current_epsilon,
    score_candidates,
)


class TestEpsilon:

    def test_starts_at_initial_epsilon(self):
        assert current_epsilon(0) == pytest.approx(0.12)

    def test_strictly_decreasing_and_positive(self):
        values = [current_epsilon(n) for n in range(0, 2000, 7)]
        assert all(v > 0 for v in values)
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_decay_per_interval(self):
        assert current_epsilon(10) == pytest.approx(0.12 * 0.98)
        assert current_epsilon(100) == pytest.approx(0.12 * 0.98 ** 10)


class TestApplyExploration:

    @pytest.fixture
    def ranked_and_pool(self, make_pool, fashion_campaign):
        pool = make_pool(20)
        ranked = score_candidates(pool[:10], fashion_campaign)
        return ranked, pool

    def test_triggered_replaces_tail(self, ranked_and_pool, fixed_draw):
        ranked, pool = ranked_and_pool
        result = apply_exploration(ranked, pool, 0, rng=fixed_draw(0.0))

        novel_count = math.ceil(0.15 * len(ranked))
        assert novel_count == 2
        assert len(result) == len(ranked)
        assert result[:-novel_count] == ranked[:-novel_count]

        ranked_ids = {s.canonical_id for s in ranked}
        for novel in result[-novel_count:]:
            assert novel.canonical_id not in ranked_ids
            assert novel.score == 0.5
            assert novel.rationale == [NOVEL_RATIONALE]

    def test_not_triggered_passes_through(self, ranked_and_pool, fixed_draw):
        ranked, pool = ranked_and_pool
        assert apply_exploration(ranked, pool, 0, rng=fixed_draw(0.99)) is ranked

    def test_no_unseen_candidates_passes_through(self, ranked_and_pool, fixed_draw):
        ranked, pool = ranked_and_pool
        assert apply_exploration(ranked, pool[:10], 0, rng=fixed_draw(0.0)) is ranked

    def test_novel_count_capped_by_unseen(self, make_pool, fashion_campaign, fixed_draw):
        pool = make_pool(21)
        ranked = score_candidates(pool[:20], fashion_campaign)
        result = apply_exploration(ranked, pool, 0, rng=fixed_draw(0.0))
        # ceil(0.15 * 20) = 3 wanted, only 1 unseen
        assert [s.canonical_id for s in result[-1:]] == ["inf-020"]
        assert result[:-1] == ranked[:-1]

    def test_empty_ranking_passes_through(self, make_pool, fixed_draw):
        assert apply_exploration([], make_pool(5), 0, rng=fixed_draw(0.0)) == []

    def test_disabled(self, ranked_and_pool, fixed_draw):
        ranked, pool = ranked_and_pool
        config = MatchmakerConfig(exploration_enabled=False)
        assert apply_exploration(ranked, pool, 0, rng=fixed_draw(0.0), config=config) is ranked

    def test_long_history_lowers_trigger_rate(self, ranked_and_pool, fixed_draw):
        ranked, pool = ranked_and_pool
        # eps(0) = 0.12, eps(1000) ~ 0.016
        assert apply_exploration(ranked, pool, 0, rng=fixed_draw(0.05)) is not ranked
        assert apply_exploration(ranked, pool, 1000, rng=fixed_draw(0.05)) is ranked

    def test_same_seed_same_novel_items(self, ranked_and_pool, fixed_draw):
        ranked, pool = ranked_and_pool
        first = apply_exploration(ranked, pool, 0, rng=fixed_draw(0.0, seed=3))
        second = apply_exploration(ranked, pool, 0, rng=fixed_draw(0.0, seed=3))
        assert [s.canonical_id for s in first] == [s.canonical_id for s in second]

    def test_pool_not_mutated(self, ranked_and_pool, fixed_draw):
        ranked, pool = ranked_and_pool
        order = [c.id for c in pool]
        apply_exploration(ranked, pool, 0, rng=fixed_draw(0.0))
        assert [c.id for c in pool] == order
