"""
EntPass Analyzers
==================

Entropy scoring, minimum-entropy threshold resolution and the parallel
statistics sampler.
"""

from entpass.analyzers.entropy import EntropyScorer, entropy_score
from entpass.analyzers.sampler import ParallelSampler
from entpass.analyzers.threshold import parse_entropy, resolve_threshold

__all__ = [
    "EntropyScorer",
    "ParallelSampler",
    "entropy_score",
    "parse_entropy",
    "resolve_threshold",
]
