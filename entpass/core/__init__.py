"""
EntPass Core Module
====================

Data models and error types of the generation core. The engine lives in
:mod:`entpass.core.engine`.
"""

from entpass.core.errors import (
    ConfigurationError,
    EntPassError,
    InvalidEntropyValue,
    WordlistUnavailable,
)
from entpass.core.models import (
    Candidate,
    EntropyScore,
    GenerationConfig,
    PasswordRecord,
    ResultSet,
    SampleStatistics,
)

__all__ = [
    "Candidate",
    "ConfigurationError",
    "EntPassError",
    "EntropyScore",
    "GenerationConfig",
    "InvalidEntropyValue",
    "PasswordRecord",
    "ResultSet",
    "SampleStatistics",
    "WordlistUnavailable",
]
