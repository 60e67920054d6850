"""
Candidate Generators
=====================

Produce one password candidate per call.

- :class:`CharacterGenerator` draws ``length`` characters uniformly, with
  replacement, from a charset.
- :class:`WordGenerator` draws ``count`` words uniformly, with replacement,
  from a wordlist and follows each one with a separator drawn from the
  separator alphabet. The separator is left out only after the word whose
  1-based position equals the size of the separator alphabet, so most
  passphrases end with a separator.

Both use :class:`random.SystemRandom` unless a seeded :class:`random.Random`
is supplied.
"""

from __future__ import annotations

from random import Random, SystemRandom
from typing import Optional, Protocol, Sequence

from entpass.core.errors import WordlistUnavailable
from entpass.core.models import GenerationConfig
from entpass.generators.charset import charset_for, separators_for
from entpass.generators.wordlist import Wordlist, get_wordlist

_system_random = SystemRandom()


class CandidateGenerator(Protocol):
    def generate(self) -> str: ...


class CharacterGenerator:
    """Random-character password generator.

    Args:
        charset: Alphabet to draw from (non-empty).
        length: Number of characters per candidate.
        rng: Random source; defaults to :class:`random.SystemRandom`.
    """

    def __init__(self, charset: str, length: int, rng: Optional[Random] = None) -> None:
        self.charset = charset
        self.length = length
        self._random = rng or _system_random

    def generate(self) -> str:
        charset = self.charset
        total = len(charset)
        randrange = self._random.randrange
        return "".join(charset[randrange(total)] for _ in range(self.length))


class WordGenerator:
    """Passphrase generator joining random words with random separators.

    Args:
        words: Words to draw from.
        separators: Separator alphabet (non-empty).
        count: Number of words per candidate.
        rng: Random source; defaults to :class:`random.SystemRandom`.

    Raises:
        WordlistUnavailable: If *words* is empty.
    """

    def __init__(
        self,
        words: Sequence[str],
        separators: str,
        count: int,
        rng: Optional[Random] = None,
    ) -> None:
        if not words:
            raise WordlistUnavailable("no words imported into memory")
        self.words = words
        self.separators = separators
        self.count = count
        self._random = rng or _system_random

    def generate(self) -> str:
        words = self.words
        separators = self.separators
        randrange = self._random.randrange
        total_words = len(words)
        total_separators = len(separators)

        picked = [words[randrange(total_words)] for _ in range(self.count)]
        parts: list[str] = []
        for position, word in enumerate(picked, start=1):
            separator = separators[randrange(total_separators)]
            if position == total_separators:
                parts.append(word)
            else:
                parts.append(word + separator)
        return "".join(parts)


def build_generator(
    config: GenerationConfig,
    wordlist: Optional[Wordlist] = None,
    rng: Optional[Random] = None,
) -> CandidateGenerator:
    """Create the generator selected by ``config.words``.

    The charset, separator alphabet and wordlist are all resolved here, so
    configuration and wordlist errors surface before any candidate is drawn.

    Raises:
        ConfigurationError: Empty charset or separator alphabet.
        WordlistUnavailable: Word mode with no usable words.
    """
    if config.words:
        words = (wordlist or get_wordlist()).load()
        return WordGenerator(words, separators_for(config), config.length, rng)
    return CharacterGenerator(charset_for(config), config.length, rng)
