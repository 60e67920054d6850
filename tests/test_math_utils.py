import numpy as np
import pytest

from shared.math_utils import intparts, length_scaled_entropy, partition, summarize


def test_intparts():
    assert intparts(10, 4) == [4, 4, 2]
    assert intparts(8, 4) == [4, 4]
    assert intparts(0, 4) == []
    with pytest.raises(ValueError):
        intparts(10, 0)


def test_partition_into_worker_chunks():
    assert partition(1000, 3) == [334, 334, 332]
    assert partition(1000, 1) == [1000]
    assert partition(3, 8) == [1, 1, 1]
    assert sum(partition(999_999, 7)) == 999_999
    assert len(partition(999_999, 7)) <= 7


def test_summarize():
    total, low, high = summarize(np.array([1.0, 4.0, 2.5]))
    assert total == pytest.approx(7.5)
    assert low == 1.0
    assert high == 4.0


def test_length_scaled_entropy():
    assert length_scaled_entropy("aabb") == pytest.approx(4.0)
