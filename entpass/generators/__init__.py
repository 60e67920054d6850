"""
EntPass Generators
===================

Charset and separator construction, the shared wordlist, candidate
generators and the entropy-gated rejection sampler.
"""

from entpass.generators.candidate import (
    CharacterGenerator,
    WordGenerator,
    build_generator,
)
from entpass.generators.charset import build_charset, build_separators
from entpass.generators.rejection import RejectionSampler
from entpass.generators.wordlist import Wordlist, get_wordlist

__all__ = [
    "CharacterGenerator",
    "RejectionSampler",
    "WordGenerator",
    "Wordlist",
    "build_charset",
    "build_generator",
    "build_separators",
    "get_wordlist",
]
