"""
EntPass -- Entropy-Gated Password Generator
============================================

Generates random-character passwords or word-based passphrases, scores
each candidate with a length-scaled Shannon entropy, and keeps
regenerating until candidates meet a minimum-entropy threshold. A parallel
sampler estimates the average, minimum, maximum and recommended entropy
for a given set of options.

Modules:
    - entpass.core.engine: Generation orchestrator
    - entpass.core.models: Settings and result models
    - entpass.generators: Charset, wordlist, candidates, rejection sampling
    - entpass.analyzers: Entropy scoring, thresholds, parallel sampling
    - entpass.output: Text/JSON rendering and console display
    - entpass.cli: Click-based command-line interface

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

__version__ = "1.0.0"
