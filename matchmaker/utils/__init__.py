"""Shared numeric utilities for scoring."""

from .normalize import clamp, exact_overlap_ratio, fuzzy_overlap_ratio, normalize

__all__ = [
    "clamp",
    "exact_overlap_ratio",
    "fuzzy_overlap_ratio",
    "normalize",
]
