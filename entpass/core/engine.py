"""
EntPass Generation Engine
==========================

Central orchestrator for password generation. :class:`EntPassEngine` wires
the charset/wordlist setup, the candidate generators, the parallel
statistics sampler, threshold resolution and the rejection sampler into two
entry points:

- :meth:`EntPassEngine.generate` returns a :class:`ResultSet` of distinct
  passwords meeting the minimum entropy;
- :meth:`EntPassEngine.report` samples the generator and returns the
  entropy statistics without generating a password.

Everything that can fail (settings, wordlist, threshold text) is checked
before the first candidate is kept.
"""

from __future__ import annotations

from random import Random
from typing import Optional

from shared.config import EntPassConfig
from shared.logger import EntPassLogger

from entpass.analyzers.entropy import EntropyScorer
from entpass.analyzers.sampler import ParallelSampler, ProgressCallback
from entpass.analyzers.threshold import decode_threshold_code, resolve_threshold
from entpass.core.models import (
    GenerationConfig,
    PasswordRecord,
    ResultSet,
    SampleStatistics,
)
from entpass.generators.candidate import CandidateGenerator, build_generator
from entpass.generators.rejection import RejectionSampler
from entpass.generators.wordlist import Wordlist, get_wordlist


class EntPassEngine:
    """Orchestrates sampling and entropy-gated generation.

    Usage::

        engine = EntPassEngine()
        results = engine.generate(GenerationConfig(length=20, min_entropy="60"))
        stats = engine.report(GenerationConfig(sample_size=10_000)).sample

    Args:
        config: Toolkit configuration (logging, worker count, wordlist path).
        wordlist: Word source for word mode; defaults to the shared list for
            the configured path.
        rng: Random source for the generators; defaults to the system CSPRNG.
    """

    def __init__(
        self,
        config: Optional[EntPassConfig] = None,
        wordlist: Optional[Wordlist] = None,
        rng: Optional[Random] = None,
    ) -> None:
        self.config = config or EntPassConfig()
        gs = self.config.global_settings
        self.logger = EntPassLogger(
            "engine",
            log_level="DEBUG" if gs.debug else gs.log_level,
            log_file=gs.log_file or None,
            json_logs=gs.log_json,
        )
        self._wordlist = wordlist
        self._rng = rng
        self._scorer = EntropyScorer()

    @property
    def wordlist(self) -> Wordlist:
        if self._wordlist is None:
            self._wordlist = get_wordlist(self.config.generator.wordlist_path or None)
        return self._wordlist

    def _generator(self, settings: GenerationConfig) -> CandidateGenerator:
        return build_generator(
            settings,
            wordlist=self.wordlist if settings.words else None,
            rng=self._rng,
        )

    def _workers(self, settings: GenerationConfig) -> Optional[int]:
        return settings.workers or self.config.global_settings.max_workers or None

    # ------------------------------------------------------------------ #
    #  Sampling
    # ------------------------------------------------------------------ #

    def sample(
        self,
        settings: GenerationConfig,
        progress: Optional[ProgressCallback] = None,
        generator: Optional[CandidateGenerator] = None,
    ) -> SampleStatistics:
        """Score ``settings.sample_size`` candidates across the worker pool."""
        generator = generator or self._generator(settings)
        sampler = ParallelSampler(
            generator, self._scorer, workers=self._workers(settings)
        )
        with self.logger.operation("sample"):
            self.logger.info(
                "Sampling %d candidates on %d workers",
                settings.sample_size,
                sampler.workers,
            )
            with self.logger.timed("entropy sampling"):
                stats = sampler.sample(settings.sample_size, progress)
            self.logger.info(
                "Sample average %.3f, min %.3f, max %.3f, recommended %.3f",
                stats.average,
                stats.min,
                stats.max,
                stats.recommended,
            )
        return stats

    def report(
        self,
        settings: GenerationConfig,
        progress: Optional[ProgressCallback] = None,
    ) -> PasswordRecord:
        """Sample the generator and return a record carrying the statistics."""
        stats = self.sample(settings, progress)
        return PasswordRecord.from_config(settings, sample=stats)

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(
        self,
        settings: GenerationConfig,
        progress: Optional[ProgressCallback] = None,
    ) -> ResultSet:
        """Collect ``settings.quantity`` distinct passwords above the threshold.

        When the threshold is ``"avg"`` the generator is sampled first and
        the sample average becomes the threshold.

        Raises:
            ConfigurationError: Invalid settings.
            WordlistUnavailable: Word mode without usable words.
            InvalidEntropyValue: Unparseable threshold text.
        """
        generator = self._generator(settings)

        if settings.uses_average:
            stats = self.sample(settings, progress, generator=generator)
        else:
            stats = SampleStatistics(limit=settings.sample_size)

        code_value = decode_threshold_code(settings.min_entropy)
        if code_value is not None:
            self.logger.info(
                "Threshold code %r computes %.1f (%s)",
                settings.min_entropy,
                code_value,
                "applied" if settings.apply_threshold_codes else "not applied",
            )

        threshold = resolve_threshold(
            settings.min_entropy,
            sample=stats,
            apply_codes=settings.apply_threshold_codes,
        )

        with self.logger.operation("generate"):
            rejection = RejectionSampler(generator, self._scorer)
            results = rejection.collect(
                threshold.value,
                settings.quantity,
                lambda candidate: PasswordRecord.from_config(
                    settings, sample=stats, candidate=candidate
                ),
            )
            self.logger.info(
                "Accepted %d password(s) at threshold %.3f after %d attempt(s)",
                len(results),
                threshold.value,
                rejection.attempts,
            )
        return results
