"""
EntPass Errors
===============

Exception hierarchy raised by the EntPass generation core. Every error is
detected eagerly, before the first candidate is generated, and is never
retried internally: the CLI reports it and exits.
"""

from __future__ import annotations


class EntPassError(Exception):
    """Base class for all EntPass errors."""

    pass


class ConfigurationError(EntPassError):
    """Invalid or contradictory generation settings.

    Raised for out-of-range lengths, quantities or sample sizes, when no
    character class is enabled, and when exclusions leave an empty charset
    or an empty separator alphabet.
    """

    pass


class WordlistUnavailable(EntPassError):
    """The word source is missing or has no usable words after filtering."""

    pass


class InvalidEntropyValue(EntPassError):
    """A minimum-entropy threshold could not be parsed as a number."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid entropy value: {value}")
        self.value = value
