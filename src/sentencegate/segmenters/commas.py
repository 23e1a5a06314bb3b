"""Comma-density clause splitting."""

from typing import Tuple

import regex

from ..core.types import CandidateSpan

# A run of commas next to a non-digit (so "1,000" is left alone), or a semicolon
COMMA_GROUP = regex.compile(r"(,+(?=\D))|((?<=\D),+)|;")


def count_whitespace(text: str) -> int:
    return sum(1 for ch in text if ch.isspace())


class CommaSplitter:
    """
    Peels comma-dense sentences into clauses, one clause per call.

    Once a sentence has been split, every following clause of it is split at
    its first comma group too, until a clause without a comma group ends the
    chain.
    """

    def __init__(self, comma_word_threshold: float):
        self.comma_word_threshold = comma_word_threshold

    def comma_to_word_ratio(self, text: str, comma_groups: int) -> float:
        """
        Ratio of comma groups to the approximate word gaps in ``text``.

        With one or no whitespace characters there are no word gaps to divide
        by; the ratio is then infinite, so such spans are always split.
        """
        gaps = count_whitespace(text) - 1
        if gaps <= 0:
            return float("inf")
        return comma_groups / gaps

    def split(self, span: CandidateSpan, chained: bool) -> Tuple[CandidateSpan, bool]:
        """
        Truncate a span after its first comma group if it is comma-dense.

        Args:
            span: Candidate sentence from the boundary scanner
            chained: Whether the previous span was itself comma-split

        Returns:
            tuple: (possibly shortened span, whether this span was comma-split)
        """
        matches = list(COMMA_GROUP.finditer(span.text))
        if not matches:
            return span, False

        ratio = self.comma_to_word_ratio(span.text, len(matches))
        if ratio > self.comma_word_threshold or chained:
            cut = matches[0].end()
            clause = CandidateSpan(start=span.start, end=span.start + cut, text=span.text[:cut])
            return clause, True

        return span, False
