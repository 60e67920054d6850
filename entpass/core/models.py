"""
EntPass Core Data Models
=========================

Pydantic models for the EntPass generation engine: the immutable per-run
``GenerationConfig``, the result records handed to the output layer, and the
sample statistics produced by the parallel sampler.

All result models serialise to JSON; zero-valued fields are dropped by
:meth:`PasswordRecord.as_json` so that the emitted documents only carry the
settings that are switched on.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from entpass.core.errors import ConfigurationError


# ===================================================================== #
#  Alphabets and Limits
# ===================================================================== #

UPPERCASE: str = string.ascii_uppercase
LOWERCASE: str = string.ascii_lowercase
DIGITS: str = string.digits
DEFAULT_SYMBOLS: str = "!@#$%^&*()_+=-[]\\{}|;':,./<>?"
DEFAULT_WORD_SEPARATORS: str = "!@#$%^&*()_+1234567890-=,.></?;:[]|"

MIN_LENGTH: int = 3
DEFAULT_CHAR_LENGTH: int = 17
DEFAULT_WORD_COUNT: int = 5
MAX_QUANTITY: int = 433
DEFAULT_SAMPLE_SIZE: int = 100_000
MAX_SAMPLE_SIZE: int = 1_000_000_000
AVERAGE_THRESHOLD: str = "avg"


# ===================================================================== #
#  Generation Settings
# ===================================================================== #


class GenerationConfig(BaseModel):
    """Immutable settings for one generation or sampling run.

    Attributes:
        length: Characters per password, or words per passphrase in word mode.
        uppercase: Include ``A-Z`` in the charset.
        lowercase: Include ``a-z`` in the charset.
        digits: Include ``0-9`` in the charset.
        symbols: Include ``symbol_chars`` in the charset.
        symbol_chars: Symbol alphabet used when ``symbols`` is enabled.
        exclude: Characters removed from the charset; removed as a literal
            substring from the separator alphabet in word mode.
        words: Generate passphrases from the wordlist instead of characters.
        word_separators: Separator alphabet for word mode.
        quantity: Number of distinct passwords to collect.
        min_entropy: Threshold text: a number, ``"avg"`` or a code like ``"n8"``.
        sample_size: Candidates scored by the statistics sampler.
        workers: Worker threads for sampling; ``None`` uses host parallelism.
        apply_threshold_codes: Use the value computed for a threshold code as
            the active threshold instead of treating the code as a literal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    length: int = DEFAULT_CHAR_LENGTH
    uppercase: bool = True
    lowercase: bool = True
    digits: bool = True
    symbols: bool = True
    symbol_chars: str = DEFAULT_SYMBOLS
    exclude: str = ""
    words: bool = False
    word_separators: str = DEFAULT_WORD_SEPARATORS
    quantity: int = 1
    min_entropy: str = AVERAGE_THRESHOLD
    sample_size: int = DEFAULT_SAMPLE_SIZE
    workers: Optional[int] = None
    apply_threshold_codes: bool = False

    @model_validator(mode="after")
    def _check_limits(self) -> GenerationConfig:
        """Reject settings no run could satisfy."""
        if self.length < MIN_LENGTH:
            raise ConfigurationError(f"Invalid length {self.length} (min {MIN_LENGTH})")
        if not 1 <= self.quantity <= MAX_QUANTITY:
            raise ConfigurationError(
                f"Invalid quantity {self.quantity} (max {MAX_QUANTITY})"
            )
        if not 1 <= self.sample_size <= MAX_SAMPLE_SIZE:
            raise ConfigurationError(
                f"Invalid sample limit {self.sample_size} (max 1B)"
            )
        if self.workers is not None and self.workers < 1:
            raise ConfigurationError(f"Invalid worker count {self.workers}")
        if not self.words and not (
            self.uppercase or self.lowercase or self.digits or self.symbols
        ):
            raise ConfigurationError(
                "Can't generate password: every character class is disabled"
            )
        return self

    @property
    def uses_average(self) -> bool:
        """Whether the threshold is relative to the sample average."""
        return self.min_entropy == AVERAGE_THRESHOLD


# ===================================================================== #
#  Candidates and Statistics
# ===================================================================== #


@dataclass(frozen=True, slots=True)
class Candidate:
    """A generated string together with its entropy score."""

    value: str
    score: float


class EntropyScore(BaseModel):
    """Length-scaled Shannon entropy of a password.

    Attributes:
        score: ``len(value) * H(value)`` in bits.
    """

    score: float = 0.0


class SampleStatistics(BaseModel):
    """Entropy statistics over a bulk of scored-but-discarded candidates.

    Attributes:
        limit: Number of candidates sampled.
        average: Mean entropy score.
        recommended: Midpoint between ``average`` and ``max``.
        min: Lowest observed score.
        max: Highest observed score.
    """

    limit: int = 0
    average: float = 0.0
    recommended: float = 0.0
    min: float = 0.0
    max: float = 0.0


class PasswordRecord(BaseModel):
    """One accepted password with an echo of the settings that produced it."""

    length: int = 0
    uppercase: bool = False
    lowercase: bool = False
    digits: bool = False
    symbols: bool = False
    words: bool = False
    value: str = ""
    sample: Optional[SampleStatistics] = None
    entropy: Optional[EntropyScore] = None

    @classmethod
    def from_config(
        cls,
        config: GenerationConfig,
        sample: Optional[SampleStatistics] = None,
        candidate: Optional[Candidate] = None,
    ) -> PasswordRecord:
        """Build a record echoing *config*, optionally carrying a candidate."""
        return cls(
            length=config.length,
            uppercase=config.uppercase,
            lowercase=config.lowercase,
            digits=config.digits,
            symbols=config.symbols,
            words=config.words,
            value=candidate.value if candidate else "",
            sample=sample,
            entropy=EntropyScore(score=candidate.score) if candidate else None,
        )

    def as_json(self) -> dict[str, Any]:
        """Serialise to a dict without zero-valued fields."""
        return self.model_dump(exclude_defaults=True)


class ResultSet:
    """Accepted passwords keyed by value.

    Adding a value that is already present replaces its record and does not
    grow the set, so the set only counts distinct strings.
    """

    def __init__(self) -> None:
        self._records: dict[str, PasswordRecord] = {}

    def add(self, record: PasswordRecord) -> None:
        self._records[record.value] = record

    def values(self) -> list[str]:
        return list(self._records)

    def records(self) -> list[PasswordRecord]:
        return list(self._records.values())

    def __contains__(self, value: object) -> bool:
        return value in self._records

    def __iter__(self) -> Iterator[PasswordRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
