"""
Minimum-Entropy Threshold Resolution
======================================

A threshold is given as text and resolves to a float once per run:

- a numeric literal (``"9.32"``) is used as-is;
- ``"avg"`` takes the sample average, rounded to three decimals;
- a two-character code ``{n,e,s}{0-9}`` computes ``"<9|8|7><digit>.0"``
  (``"n8"`` -> 98.0, ``"e8"`` -> 88.0, ``"s0"`` -> 70.0).

Codes are only applied when ``apply_codes`` is set. Otherwise the computed
value is reported and the code text stays the threshold, which is not a
number and fails with :class:`InvalidEntropyValue`. Applying it changes what
a run accepts, so it is opt-in.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import Optional

from entpass.core.errors import ConfigurationError, InvalidEntropyValue
from entpass.core.models import AVERAGE_THRESHOLD, SampleStatistics

_CODE_TENS: dict[str, str] = {"n": "9", "e": "8", "s": "7"}


def parse_entropy(value: str) -> float:
    """Parse a threshold literal; ``"avg"`` parses as 0.0.

    Raises:
        InvalidEntropyValue: For text that is not a finite number.
    """
    if value == AVERAGE_THRESHOLD:
        return 0.0
    try:
        parsed = float(value.strip())
    except ValueError:
        raise InvalidEntropyValue(value) from None
    if not math.isfinite(parsed):
        raise InvalidEntropyValue(value)
    return parsed


def decode_threshold_code(value: str) -> Optional[float]:
    """Return the value encoded by a ``{n,e,s}{digit}`` code, else ``None``."""
    if len(value) != 2:
        return None
    letter, digit = value
    tens = _CODE_TENS.get(letter)
    if tens is None or digit not in string.digits:
        return None
    return parse_entropy(f"{tens}{digit}.0")


@dataclass(frozen=True, slots=True)
class ResolvedThreshold:
    """Outcome of threshold resolution.

    Attributes:
        value: Active minimum entropy score.
        text: Threshold text that was parsed into ``value``.
        code_value: Value computed for a threshold code, if one was given.
    """

    value: float
    text: str
    code_value: Optional[float] = None


def resolve_threshold(
    min_entropy: str,
    sample: Optional[SampleStatistics] = None,
    apply_codes: bool = False,
) -> ResolvedThreshold:
    """Resolve threshold text into the active minimum entropy score.

    Args:
        min_entropy: Threshold text.
        sample: Sample statistics; required for ``"avg"``.
        apply_codes: Use a code's computed value as the threshold.

    Raises:
        ConfigurationError: ``"avg"`` without sample statistics.
        InvalidEntropyValue: Unparseable threshold text.
    """
    text = min_entropy
    if text == AVERAGE_THRESHOLD:
        if sample is None:
            raise ConfigurationError(
                "An average threshold needs sample statistics"
            )
        text = f"{sample.average:.3f}"

    code_value = decode_threshold_code(text)
    if code_value is not None and apply_codes:
        text = f"{code_value:.1f}"

    return ResolvedThreshold(
        value=parse_entropy(text), text=text, code_value=code_value
    )
