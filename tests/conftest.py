import random

import pytest

from entpass.generators.wordlist import Wordlist

WORDS = [
    "abandon", "ability", "absence", "academy", "account", "achieve",
    "address", "advance", "airline", "airport", "already", "amazing",
    "ancient", "another", "anxiety", "archive", "article", "balance",
    "battery", "believe", "benefit", "between", "bicycle", "blanket",
    "blossom", "cabinet", "calendar", "captain", "caution", "century",
    "chamber", "channel", "chapter", "charity", "chicken", "citizen",
    "climate", "college", "comfort", "compass", "concert", "confirm",
    "connect", "control", "costume", "cottage", "country", "courage",
    "crystal", "culture", "curtain", "cushion", "dancer", "decade",
    "default", "delight", "deliver", "diamond", "dolphin", "dragon",
]


@pytest.fixture
def word_text():
    # short entries are dropped when the list is loaded
    return "\n".join(WORDS + ["short", "tiny", "  ", "word"])


@pytest.fixture
def wordlist(word_text):
    return Wordlist(lambda: word_text)


@pytest.fixture
def word_file(tmp_path, word_text):
    path = tmp_path / "words.txt"
    path.write_text(word_text, encoding="utf-8")
    return path


@pytest.fixture
def rng():
    return random.Random(20240601)


@pytest.fixture
def words():
    return list(WORDS)
