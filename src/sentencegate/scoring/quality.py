"""Stopword-ratio scoring of sentence spans."""

from typing import List, Optional

import regex

from ..core.abc import StopwordLookup
from ..core.types import SentenceStatistics
from .normalize import Normalizer, lower_root

# Digits and punctuation that carry no information for stopword matching
NOISE_CHARS = "0123456789,;.:$!?%&/<>™®-–'\"|"
_NOISE_TABLE = str.maketrans("", "", NOISE_CHARS)
_WHITESPACE_RUN = regex.compile(r"\s+")


class QualityScorer:
    """Counts words and stopwords in a span after removing noise."""

    def __init__(self, stopwords: StopwordLookup, normalizer: Optional[Normalizer] = None):
        self.stopwords = stopwords
        self.normalizer = normalizer or lower_root

    def clean(self, text: str) -> str:
        """Trim, drop noise characters, collapse whitespace and lowercase."""
        text = text.strip().translate(_NOISE_TABLE)
        text = _WHITESPACE_RUN.sub(" ", text)
        return self.normalizer(text)

    def words(self, text: str) -> List[str]:
        """
        Split a span into words.

        Splits on single spaces of the cleaned text, so a word that consisted
        only of noise at either edge still counts as an (empty) word.
        """
        cleaned = self.clean(text)
        if not cleaned:
            return []
        return [w.strip() for w in cleaned.split(" ")]

    def analyze(self, text: str) -> SentenceStatistics:
        """
        Compute word and stopword counts for a span.

        Args:
            text: Raw span text

        Returns:
            SentenceStatistics: Counts for the stopword ratio
        """
        words = self.words(text)
        stopword_count = sum(1 for w in words if w in self.stopwords)
        return SentenceStatistics(word_count=len(words), stopword_count=stopword_count)
