"""
Wordlist
=========

Lazily loaded, read-only word source for passphrase generation.

The list is read from a newline-delimited text file (the bundled English
list by default), stripped, and filtered to words strictly longer than
:data:`MIN_WORD_LENGTH` characters. Loading happens once per source, under
a lock, so that concurrent sampler workers asking for the words at the same
time never trigger a second load.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from entpass.core.errors import WordlistUnavailable

MIN_WORD_LENGTH = 5

DEFAULT_WORDLIST_PATH: Path = (
    Path(__file__).resolve().parent.parent / "data" / "words-english.txt"
)

WordSource = Union[Path, Callable[[], str]]


def filter_wordlist(lines: Iterable[str], min_length: int = MIN_WORD_LENGTH) -> tuple:
    """Strip each line and keep words longer than *min_length*."""
    words = (line.strip() for line in lines)
    return tuple(w for w in words if len(w) > min_length)


class Wordlist:
    """Execute-once loader around a word source.

    Args:
        source: Path of a text file, or a callable returning the text.
            Defaults to the bundled English list.
        min_length: Words must be strictly longer than this.
    """

    def __init__(
        self,
        source: Optional[WordSource] = None,
        min_length: int = MIN_WORD_LENGTH,
    ) -> None:
        self.source: WordSource = source if source is not None else DEFAULT_WORDLIST_PATH
        self.min_length = min_length
        self._words: Optional[tuple] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._words is not None

    def load(self) -> tuple:
        """Return the filtered words, reading the source on first use.

        Raises:
            WordlistUnavailable: If the source cannot be read or holds no
                word long enough.
        """
        words = self._words
        if words is not None:
            return words
        with self._lock:
            if self._words is None:
                self._words = self._read()
            return self._words

    def _read(self) -> tuple:
        if callable(self.source):
            text = self.source()
        else:
            try:
                text = Path(self.source).read_text(encoding="utf-8")
            except OSError as exc:
                raise WordlistUnavailable(
                    f"Cannot read wordlist {str(self.source)!r}: {exc}"
                ) from exc
        words = filter_wordlist(text.splitlines(), self.min_length)
        if not words:
            raise WordlistUnavailable("no words imported into memory")
        return words

    def __len__(self) -> int:
        return len(self.load())


# ========================= Process-wide registry ===========================

_registry: dict[str, Wordlist] = {}
_registry_lock = threading.Lock()


def get_wordlist(path: Union[str, Path, None] = None) -> Wordlist:
    """Return the shared :class:`Wordlist` for *path* (bundled list if empty)."""
    resolved = Path(path).expanduser() if path else DEFAULT_WORDLIST_PATH
    key = str(resolved)
    with _registry_lock:
        wordlist = _registry.get(key)
        if wordlist is None:
            wordlist = _registry[key] = Wordlist(resolved)
        return wordlist
