import random
import re
import string

import pytest

from entpass.core.errors import ConfigurationError, WordlistUnavailable
from entpass.core.models import DEFAULT_SYMBOLS, DEFAULT_WORD_SEPARATORS, GenerationConfig
from entpass.generators.candidate import (
    CharacterGenerator,
    WordGenerator,
    build_generator,
)
from entpass.generators.charset import build_charset


def _letters_and_separators(passphrase):
    words = re.findall(r"[a-z]+", passphrase)
    separators = re.sub(r"[a-z]+", "", passphrase)
    return words, separators


def test_character_candidates_use_the_charset():
    charset = build_charset(symbol_chars=DEFAULT_SYMBOLS)
    generator = CharacterGenerator(charset, 30)
    for _ in range(200):
        password = generator.generate()
        assert len(password) == 30
        assert all(c in charset for c in password)


def test_character_candidates_respect_exclusions():
    config = GenerationConfig(length=40, symbols=False, exclude="aeiouAEIOU0")
    generator = build_generator(config)
    for _ in range(100):
        password = generator.generate()
        assert not set(password) & set("aeiouAEIOU0")
        assert all(c in string.ascii_letters + string.digits for c in password)


def test_seeded_generator_is_reproducible():
    first = CharacterGenerator("abcdef", 12, random.Random(7)).generate()
    second = CharacterGenerator("abcdef", 12, random.Random(7)).generate()
    assert first == second


def test_five_words_with_separators(words, rng):
    generator = WordGenerator(words, DEFAULT_WORD_SEPARATORS, 5, rng)
    for _ in range(50):
        passphrase = generator.generate()
        picked, separators = _letters_and_separators(passphrase)
        assert len(picked) == 5
        assert all(word in words for word in picked)
        # a separator follows every word, the last one included
        assert len(separators) == 5
        assert all(s in DEFAULT_WORD_SEPARATORS for s in separators)
        assert not passphrase[-1].isalpha()


def test_separator_skipped_at_alphabet_size_position(words, rng):
    # with 5 separators the fifth word has no separator after it
    generator = WordGenerator(words, "-_.+=", 5, rng)
    passphrase = generator.generate()
    picked, separators = _letters_and_separators(passphrase)
    assert len(picked) == 5
    assert len(separators) == 4
    assert passphrase[-1].isalpha()


def test_separator_skip_inside_the_phrase(words, rng):
    # with 3 separators words 3 and 4 run together
    generator = WordGenerator(words, "-_.", 5, rng)
    passphrase = generator.generate()
    runs, separators = _letters_and_separators(passphrase)
    assert len(separators) == 4
    assert len(runs) == 4


def test_empty_words_are_unavailable():
    with pytest.raises(WordlistUnavailable):
        WordGenerator([], "-", 5)


def test_build_word_generator(wordlist, rng):
    config = GenerationConfig(words=True, length=5, exclude="1234567890")
    generator = build_generator(config, wordlist=wordlist, rng=rng)
    assert isinstance(generator, WordGenerator)
    assert not any(c.isdigit() for c in generator.separators)
    picked, _ = _letters_and_separators(generator.generate())
    assert len(picked) == 5


def test_build_word_generator_without_separators(wordlist):
    config = GenerationConfig(words=True, length=5, word_separators="-_", exclude="-_")
    with pytest.raises(ConfigurationError):
        build_generator(config, wordlist=wordlist)
