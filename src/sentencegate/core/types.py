"""Data types and result structures for SentenceGate operations."""

from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class Token:
    """A sentence or clause emitted from the token stream."""
    text: str
    start_offset: int            # Offset in the original input (after correction)
    end_offset: int
    position_increment: int = 1  # Always 1; skipped spans leave no gap

@dataclass(frozen=True)
class CandidateSpan:
    """A tentative sentence or clause before quality scoring."""
    start: int                   # Buffer offset, inclusive
    end: int                     # Buffer offset, exclusive
    text: str

    def __len__(self) -> int:
        return self.end - self.start

@dataclass(frozen=True)
class SentenceStatistics:
    """Word and stopword counts of a normalized span."""
    word_count: int
    stopword_count: int

    @property
    def stopword_ratio(self) -> float:
        """Fraction of words that are stopwords (0 for an empty span)."""
        if self.word_count <= 0:
            return 0.0
        return self.stopword_count / self.word_count

@dataclass
class FilterResult:
    """Result of running a whole document through the gate."""
    kept_text: str                 # Concatenated text of emitted tokens
    tokens: List[Token]
    emitted: int
    skipped: int
    end_offset: int                # Corrected offset of the document end
    skipped_spans: List[CandidateSpan] = field(default_factory=list)

    @property
    def skip_ratio(self) -> float:
        """Fraction of spans that were filtered out."""
        total = self.emitted + self.skipped
        if not total:
            return 0.0
        return self.skipped / total
