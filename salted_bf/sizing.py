"""Sizing formulas for the salted Bloom filter.

``bit_space_size`` and ``hash_function_count`` are the usual optimal-filter
formulas (see https://samwho.dev/bloom-filters/). They do no range checking:
callers that need guarded inputs validate before calling.
"""
from __future__ import annotations

import math

LN2 = math.log(2)


def bit_space_size(expected_items: int, false_positive_rate: float) -> int:
    """Return ``m``, the bit count for ``expected_items`` at the given rate."""
    n = -expected_items * math.log(false_positive_rate)
    return math.ceil(n / LN2 ** 2)


def hash_function_count(bit_space_size: int, max_items: int) -> int:
    """Return ``k`` for a filter whose index space holds ``max_items`` slots."""
    return math.ceil((bit_space_size / max_items) * LN2)


def fill_ratio(max_items: int, num_hashes: int, inserted: int) -> float:
    """Expected fraction of active positions after ``inserted`` distinct adds."""
    return 1.0 - (1.0 - 1.0 / max_items) ** (num_hashes * inserted)


def predicted_false_positive_rate(fill: float, num_hashes: int, match: str = "any") -> float:
    """Probability that a never-added value is reported present.

    With ``match="any"`` a probe hits if at least one of its ``num_hashes``
    positions is active; with ``match="all"`` every position must be active.
    """
    if match == "any":
        return 1.0 - (1.0 - fill) ** num_hashes
    if match == "all":
        return fill ** num_hashes
    raise ValueError(f"unknown match mode: {match!r}")
