"""
Normalization helpers — min-max clamping and tag-set overlap ratios.
"""

from typing import Iterable


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def normalize(value: float, lo: float, hi: float) -> float:
    """
    Linear min-max normalization clamped to [0, 1].
    A degenerate range (lo == hi) yields the neutral 0.5.
    """
    if hi == lo:
        return 0.5
    return clamp((value - lo) / (hi - lo))


def _fuzzy_match(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def fuzzy_overlap_ratio(candidate_tags: Iterable[str], target_tags: Iterable[str]) -> float:
    """
    Share of candidate tags that fuzzy-match a target tag, over max(|A|, |B|).

    A tag matches when either string contains the other, case-insensitively.
    Two empty sets yield 0.
    """
    a = list(candidate_tags)
    b = list(target_tags)
    denominator = max(len(a), len(b))
    if denominator == 0:
        return 0.0
    matched = sum(1 for tag in a if any(_fuzzy_match(tag, t) for t in b))
    return matched / denominator


def exact_overlap_ratio(candidate_tags: Iterable[str], target_tags: Iterable[str]) -> float:
    """Share of candidate tags present in the target set, over max(|A|, |B|); 0 when both empty."""
    a = list(candidate_tags)
    b = list(target_tags)
    denominator = max(len(a), len(b))
    if denominator == 0:
        return 0.0
    target = set(b)
    return sum(1 for tag in a if tag in target) / denominator
