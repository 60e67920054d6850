"""
EntPass Mathematical Utilities
===============================

Entropy estimators and work-partitioning helpers shared by the EntPass
generators and samplers.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Hashable, Sequence

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
#  Type aliases for readability
# ---------------------------------------------------------------------------
FloatArray = NDArray[np.floating]


# ========================== Entropy Measures ===============================


def shannon_entropy(data: Sequence[Hashable]) -> float:
    """Compute the Shannon entropy of a symbol sequence.

    .. math::

        H = -\\sum_i p_i \\, \\log_2(p_i)

    where :math:`p_i` is the relative frequency of symbol *i* in *data*.
    Works for byte strings (symbols are byte values) and text (symbols are
    characters). The result is in **bits per symbol**.

    Reference:
        Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.

    Args:
        data: Symbol sequence to analyse.

    Returns:
        Shannon entropy in bits per symbol. Returns 0.0 for empty input.
    """
    if not data:
        return 0.0

    length = len(data)
    counts = Counter(data)
    entropy = 0.0
    for count in counts.values():
        p = count / length
        if p > 0.0:
            entropy -= p * math.log2(p)
    return entropy


def length_scaled_entropy(data: Sequence[Hashable]) -> float:
    """Shannon entropy multiplied by the sequence length.

    This is the total information content of *data* under its own
    empirical distribution, so longer sequences score higher.
    """
    return shannon_entropy(data) * len(data)


# ========================== Aggregation ====================================


def summarize(scores: FloatArray) -> tuple[float, float, float]:
    """Return ``(sum, min, max)`` of a non-empty score array."""
    return float(scores.sum()), float(scores.min()), float(scores.max())


# ========================== Partitioning ===================================


def intparts(total: int, size: int) -> list[int]:
    """Split *total* into consecutive parts of at most *size*.

    The last part holds the remainder and may be smaller.

    Example::

        >>> intparts(10, 4)
        [4, 4, 2]

    Raises:
        ValueError: If *size* is not positive.
    """
    if size <= 0:
        raise ValueError(f"part size must be positive, got {size}")
    parts: list[int] = []
    while total > 0:
        part = min(total, size)
        parts.append(part)
        total -= part
    return parts


def partition(total: int, workers: int) -> list[int]:
    """Split *total* into at most *workers* near-equal chunks."""
    return intparts(total, max(1, math.ceil(total / max(1, workers))))
