"""
Stopword providers for SentenceGate.

A provider owns the current stopword set and hands it out read-only to every
document. Reloading builds a complete new set and swaps the reference, so a
document that is already being segmented keeps the set it started with.
"""

import warnings
from pathlib import Path
from typing import Iterable, Optional, Union

from ..core.abc import Logger
from ..scoring.normalize import Normalizer
from .wordlist import StopwordSet, load_word_set


class StaticStopwordProvider:
    """Provider backed by an in-memory word list."""

    def __init__(self, words: Iterable[str] = (), ignore_case: bool = True,
                 normalizer: Optional[Normalizer] = None):
        self._words = StopwordSet.from_words(words, ignore_case=ignore_case, normalizer=normalizer)

    def current(self) -> StopwordSet:
        return self._words

    def reload(self) -> StopwordSet:
        return self._words

    def __repr__(self) -> str:
        return f"StaticStopwordProvider(size={len(self._words)})"


class FileStopwordProvider:
    """
    Provider that reads stopwords from one or more word-list files.

    A missing source is not fatal: the provider serves an empty set and
    reports a warning. Unreadable files raise ``StopwordLoadError`` from the
    constructor and from ``reload()``.
    """

    def __init__(self, source: Optional[str], *,
                 ignore_case: bool = True,
                 base_dir: Optional[Union[str, Path]] = None,
                 normalizer: Optional[Normalizer] = None,
                 logger: Optional[Logger] = None):
        """
        Initialize the provider and load the initial set.

        Args:
            source: Comma-separated list of word-list files, or None
            ignore_case: Lowercase entries when loading
            base_dir: Directory that relative file names are resolved against
            normalizer: Lowercasing strategy for entries; defaults to ``str.lower``
            logger: Optional structured logger
        """
        self.source = source
        self.ignore_case = ignore_case
        self.base_dir = base_dir
        self.normalizer = normalizer
        self.log = logger

        if not source:
            message = "No stopword source configured; sentences cannot be scored for information gain"
            if self.log:
                self.log.warn("stopwords_missing", detail=message)
            else:
                warnings.warn(message, UserWarning, stacklevel=2)

        self._words = self._load()

    def _load(self) -> StopwordSet:
        if not self.source:
            return StopwordSet.empty()

        words = load_word_set(self.source, ignore_case=self.ignore_case,
                              base_dir=self.base_dir, normalizer=self.normalizer)
        if self.log:
            self.log.info("stopwords_loaded", source=self.source, count=len(words))
        return words

    def current(self) -> StopwordSet:
        return self._words

    def reload(self) -> StopwordSet:
        """Re-read the source files and swap in the new set."""
        words = self._load()
        self._words = words
        return words

    def __repr__(self) -> str:
        return f"FileStopwordProvider(source={self.source!r}, size={len(self._words)})"


def create_stopword_provider(source: Optional[str], *, ignore_case: bool = True,
                             base_dir: Optional[Union[str, Path]] = None,
                             normalizer: Optional[Normalizer] = None,
                             logger: Optional[Logger] = None) -> FileStopwordProvider:
    """Create a file-backed stopword provider."""
    return FileStopwordProvider(source, ignore_case=ignore_case, base_dir=base_dir,
                                normalizer=normalizer, logger=logger)
