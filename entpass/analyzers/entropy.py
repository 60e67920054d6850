"""
Entropy Scorer
===============

Scores password candidates with a length-scaled Shannon entropy:

.. math::

    S(x) = |x| \\cdot \\left(-\\sum_c p_c \\log_2 p_c\\right)

where :math:`p_c` is the relative frequency of character *c* in *x*. The
score is the total information content of the string under its own
character distribution, so a longer password scores higher than a shorter
one with the same mix. It is a descriptive measure, not a guess count.

Properties:
    - ``S(x) >= 0`` for every string.
    - ``S(x) == 0`` for the empty string and for one repeated character.

Reference:
    Shannon, C. E. (1948). A Mathematical Theory of Communication.
    Bell System Technical Journal, 27(3), 379-423.
"""

from __future__ import annotations

from shared.math_utils import length_scaled_entropy
from entpass.core.models import Candidate


def entropy_score(value: str) -> float:
    """Return the length-scaled Shannon entropy of *value*."""
    return length_scaled_entropy(value)


class EntropyScorer:
    """Turns generated strings into scored :class:`Candidate` objects."""

    def score(self, value: str) -> float:
        return entropy_score(value)

    def evaluate(self, value: str) -> Candidate:
        return Candidate(value=value, score=entropy_score(value))
