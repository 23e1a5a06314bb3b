"""Incremental emit/skip state machine over one document."""

from enum import Enum
from typing import List, Optional

from ..core.abc import Logger, Meter, OffsetCorrector
from ..core.types import CandidateSpan, SentenceStatistics, Token
from ..core.util import hash_text
from ..scoring.quality import QualityScorer
from ..segmenters.boundary import BoundaryScanner
from ..segmenters.buffer import DocumentBuffer
from ..segmenters.commas import CommaSplitter


class EmissionState(Enum):
    SCANNING = "scanning"
    DONE = "done"


class EmissionController:
    """
    Pull-based token stream for a single document.

    Every ``next()`` consumes spans until one of them should be emitted or
    the document is exhausted. Skipped spans advance the cursor but leave no
    gap in positions: each token has a position increment of 1.

    A controller processes exactly one document; call ``reset()`` to reuse it
    for another one.
    """

    def __init__(self, text: str, *,
                 scorer: QualityScorer,
                 splitter: CommaSplitter,
                 filter_enabled: bool = False,
                 max_stopword_ratio: float,
                 min_sentence_length: int,
                 offset_corrector: Optional[OffsetCorrector] = None,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize the controller for one document.

        Args:
            text: Complete document text
            scorer: Scorer bound to the stopword set for this document
            splitter: Comma splitter with the configured threshold
            filter_enabled: If false, every span is emitted
            max_stopword_ratio: Spans above this ratio are skipped
            min_sentence_length: Spans with fewer words are always emitted
            offset_corrector: Optional mapping back to original input offsets
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.scorer = scorer
        self.splitter = splitter
        self.filter_enabled = filter_enabled
        self.max_stopword_ratio = max_stopword_ratio
        self.min_sentence_length = min_sentence_length
        self.log = logger
        self.meter = meter
        self.reset(text, offset_corrector)

    def reset(self, text: str, offset_corrector: Optional[OffsetCorrector] = None) -> None:
        """Start over on a new document, clearing all per-document state."""
        self.buffer = DocumentBuffer(text, offset_corrector)
        self.scanner = BoundaryScanner(self.buffer)
        self.index = 0
        self.last_span_was_comma_split = False
        self.emitted = 0
        self.skipped_spans: List[CandidateSpan] = []
        self.end_offset: Optional[int] = None
        self.state = EmissionState.SCANNING
        if not text:
            self._finish()

    @property
    def skipped(self) -> int:
        return len(self.skipped_spans)

    def __iter__(self) -> "EmissionController":
        return self

    def __next__(self) -> Token:
        while self.state is EmissionState.SCANNING:
            token = self._step()
            if self.index >= len(self.buffer):
                self._finish()
            if token is not None:
                return token
        raise StopIteration

    def end(self) -> int:
        """
        Drain the stream and return the corrected offset of the document end.

        Downstream consumers use it as a zero-length end marker.
        """
        for _ in self:
            pass
        return self.end_offset

    def should_emit(self, stats: SentenceStatistics, is_only_sentence: bool) -> bool:
        """Apply the emit policy to a scored span."""
        if not self.filter_enabled or is_only_sentence:
            return True
        if stats.stopword_ratio <= self.max_stopword_ratio:
            return True
        # Short spans are never filtered
        return stats.word_count < self.min_sentence_length

    def _step(self) -> Optional[Token]:
        start = self.index
        end = self.scanner.next_end(start)
        span = CandidateSpan(start=start, end=end, text=self.buffer.slice(start, end))

        span, self.last_span_was_comma_split = self.splitter.split(
            span, self.last_span_was_comma_split)

        is_only_sentence = len(span) == len(self.buffer)
        stats = self.scorer.analyze(span.text)
        emit = self.should_emit(stats, is_only_sentence)

        # emitted or not, the cursor moves past the span
        self.index = span.end

        if self.meter:
            self.meter.observe("sentencegate.stopword_ratio", stats.stopword_ratio)

        if not emit:
            self.skipped_spans.append(span)
            if self.meter:
                self.meter.inc("sentencegate.skipped")
            if self.log:
                self.log.info("span_skipped",
                              start=span.start,
                              end=span.end,
                              words=stats.word_count,
                              stopword_ratio=round(stats.stopword_ratio, 3))
            return None

        self.emitted += 1
        if self.meter:
            self.meter.inc("sentencegate.emitted")

        return Token(
            text=span.text,
            start_offset=self.buffer.correct_offset(span.start),
            end_offset=self.buffer.correct_offset(span.end),
            position_increment=1,
        )

    def _finish(self) -> None:
        self.end_offset = self.buffer.correct_offset(len(self.buffer))
        self.state = EmissionState.DONE
        if self.log:
            self.log.info("document_done",
                          doc=hash_text(self.buffer.text),
                          length=len(self.buffer),
                          emitted=self.emitted,
                          skipped=self.skipped)
