"""
Rejection Sampler
==================

Regenerates candidates until enough of them meet a minimum entropy score.

Accepted candidates are stored in a :class:`ResultSet` keyed by value, so a
string generated twice takes one slot. There is no attempt limit: a
threshold above the best score the generator can reach never finishes.
"""

from __future__ import annotations

from typing import Callable, Optional

from entpass.analyzers.entropy import EntropyScorer
from entpass.core.models import Candidate, PasswordRecord, ResultSet
from entpass.generators.candidate import CandidateGenerator

RecordFactory = Callable[[Candidate], PasswordRecord]


def _bare_record(candidate: Candidate) -> PasswordRecord:
    return PasswordRecord(value=candidate.value, entropy={"score": candidate.score})


class RejectionSampler:
    """Collects distinct candidates scoring at or above a threshold."""

    def __init__(
        self,
        generator: CandidateGenerator,
        scorer: Optional[EntropyScorer] = None,
    ) -> None:
        self.generator = generator
        self.scorer = scorer or EntropyScorer()
        self.attempts = 0

    def next_accepted(self, threshold: float) -> Candidate:
        """Generate until one candidate scores ``>= threshold``."""
        while True:
            self.attempts += 1
            candidate = self.scorer.evaluate(self.generator.generate())
            if candidate.score >= threshold:
                return candidate

    def collect(
        self,
        threshold: float,
        quantity: int,
        make_record: Optional[RecordFactory] = None,
    ) -> ResultSet:
        """Return a result set holding *quantity* distinct accepted values."""
        make_record = make_record or _bare_record
        results = ResultSet()
        while len(results) < quantity:
            results.add(make_record(self.next_accepted(threshold)))
        return results
