import itertools

import pytest

from entpass.core.models import GenerationConfig
from entpass.generators.candidate import build_generator
from entpass.generators.rejection import RejectionSampler


class _Sequence:
    def __init__(self, values):
        self._values = itertools.cycle(values)

    def generate(self):
        return next(self._values)


def test_quantity_of_distinct_values():
    generator = build_generator(GenerationConfig())
    results = RejectionSampler(generator).collect(0.0, 5)
    assert len(results) == 5
    assert len(set(results.values())) == 5


def test_duplicates_take_one_slot():
    sampler = RejectionSampler(_Sequence(["aaa", "abc", "abc", "abd"]))
    results = sampler.collect(0.0, 3)
    assert results.values() == ["aaa", "abc", "abd"]
    assert sampler.attempts == 4


def test_low_entropy_candidates_are_rejected():
    sampler = RejectionSampler(_Sequence(["aaaa", "aabb", "abcd"]))
    results = sampler.collect(5.0, 1)
    assert results.values() == ["abcd"]
    assert sampler.attempts == 3
    record = results.records()[0]
    assert record.entropy.score == pytest.approx(8.0)


def test_default_settings_accept_on_first_attempt():
    generator = build_generator(GenerationConfig(length=17))
    sampler = RejectionSampler(generator)
    candidate = sampler.next_accepted(0.0)
    assert sampler.attempts == 1
    assert len(candidate.value) == 17
    assert candidate.score > 0
