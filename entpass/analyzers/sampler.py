"""
Parallel Statistics Sampler
============================

Estimates the entropy distribution of a generator by scoring a large
number of throw-away candidates on a fixed pool of worker threads.

The sample count *N* is split into at most *W* chunks of ``ceil(N / W)``
candidates (the last chunk may be smaller). Each worker generates and
scores its chunk in numpy batches, keeping a local sum, minimum and
maximum, and merges them into the shared accumulator under one lock when
the chunk is done. The caller waits for every worker before reading:

- ``average = sum / N``
- ``recommended = (average + max) / 2``

Progress is reported through an optional callback that receives the number
of candidates finished in each batch; it may be called from any worker
thread.
"""

from __future__ import annotations

import math
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

import numpy as np

from shared.math_utils import partition, summarize
from entpass.analyzers.entropy import EntropyScorer
from entpass.core.models import SampleStatistics
from entpass.generators.candidate import CandidateGenerator

ProgressCallback = Callable[[int], None]

DEFAULT_BATCH_SIZE = 4096


def default_workers() -> int:
    """Worker count matching the host's available parallelism."""
    try:
        return len(os.sched_getaffinity(0)) or 1
    except AttributeError:
        return os.cpu_count() or 1


class _Accumulator:
    """Global sum/min/max guarded by a single lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.total = 0.0
        self.min = math.inf
        self.max = 0.0

    def merge(self, total: float, low: float, high: float) -> None:
        with self._lock:
            self.total += total
            if low < self.min:
                self.min = low
            if high > self.max:
                self.max = high


class ParallelSampler:
    """Scores many candidates concurrently and summarises their entropy.

    Args:
        generator: Candidate generator shared read-only by all workers.
        scorer: Entropy scorer; defaults to :class:`EntropyScorer`.
        workers: Pool size; defaults to :func:`default_workers`.
        batch_size: Candidates scored per numpy batch inside a worker.
    """

    def __init__(
        self,
        generator: CandidateGenerator,
        scorer: Optional[EntropyScorer] = None,
        workers: Optional[int] = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self.generator = generator
        self.scorer = scorer or EntropyScorer()
        self.workers = workers or default_workers()
        self.batch_size = batch_size

    def sample(
        self, count: int, progress: Optional[ProgressCallback] = None
    ) -> SampleStatistics:
        """Score *count* candidates and return their statistics.

        Raises:
            ValueError: If *count* is not positive.
        """
        if count <= 0:
            raise ValueError(f"sample count must be positive, got {count}")

        chunks = partition(count, self.workers)
        accumulator = _Accumulator()

        with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            futures = [
                executor.submit(self._run_chunk, chunk, accumulator, progress)
                for chunk in chunks
            ]
            for future in futures:
                future.result()

        average = accumulator.total / count
        return SampleStatistics(
            limit=count,
            average=average,
            recommended=(average + accumulator.max) / 2,
            min=accumulator.min,
            max=accumulator.max,
        )

    def _run_chunk(
        self,
        size: int,
        accumulator: _Accumulator,
        progress: Optional[ProgressCallback],
    ) -> None:
        generate = self.generator.generate
        score = self.scorer.score
        local_total, local_min, local_max = 0.0, math.inf, 0.0

        remaining = size
        while remaining > 0:
            batch = min(remaining, self.batch_size)
            scores = np.fromiter(
                (score(generate()) for _ in range(batch)),
                dtype=np.float64,
                count=batch,
            )
            total, low, high = summarize(scores)
            local_total += total
            local_min = min(local_min, low)
            local_max = max(local_max, high)
            remaining -= batch
            if progress is not None:
                progress(batch)

        accumulator.merge(local_total, local_min, local_max)
