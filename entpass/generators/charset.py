"""
Charset Builder
================

Assembles the alphabet used by character-mode generation and the separator
alphabet used by word mode.

The charset is the in-order concatenation of the enabled classes
(uppercase, lowercase, digits, symbols). Excluded characters are then
removed one by one; duplicates supplied in the symbol alphabet are kept so
that they weigh more in the uniform draw.

Separators are treated differently: the exclusion string is removed from
the separator alphabet as a literal substring, not per character.
"""

from __future__ import annotations

from entpass.core.errors import ConfigurationError
from entpass.core.models import DIGITS, LOWERCASE, UPPERCASE, GenerationConfig


def apply_exclusions(charset: str, exclude: str) -> str:
    """Remove every occurrence of every character of *exclude*."""
    for char in exclude:
        charset = charset.replace(char, "")
    return charset


def build_charset(
    *,
    uppercase: bool = True,
    lowercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
    symbol_chars: str = "",
    exclude: str = "",
) -> str:
    """Build the character-mode alphabet.

    Raises:
        ConfigurationError: If no character survives class selection and
            exclusion.
    """
    charset = ""
    if uppercase:
        charset += UPPERCASE
    if lowercase:
        charset += LOWERCASE
    if digits:
        charset += DIGITS
    if symbols:
        charset += symbol_chars

    charset = apply_exclusions(charset, exclude)
    if not charset:
        raise ConfigurationError("Can't generate password: the charset is empty")
    return charset


def build_separators(separators: str, exclude: str = "") -> str:
    """Build the word-mode separator alphabet.

    Raises:
        ConfigurationError: If the exclusion leaves no separator.
    """
    if exclude:
        separators = separators.replace(exclude, "")
    if not separators:
        raise ConfigurationError(
            "Can't generate passphrase: the separator alphabet is empty"
        )
    return separators


def charset_for(config: GenerationConfig) -> str:
    """Build the character-mode alphabet described by *config*."""
    return build_charset(
        uppercase=config.uppercase,
        lowercase=config.lowercase,
        digits=config.digits,
        symbols=config.symbols,
        symbol_chars=config.symbol_chars,
        exclude=config.exclude,
    )


def separators_for(config: GenerationConfig) -> str:
    """Build the word-mode separator alphabet described by *config*."""
    return build_separators(config.word_separators, config.exclude)
