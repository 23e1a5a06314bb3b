"""Sentence gate: the configured entry point that hosts hold on to."""

from pathlib import Path
from typing import List, Optional, Union

from ..config.schema import GateConfig
from ..core.abc import Logger, Meter, OffsetCorrector, StopwordProvider
from ..core.types import FilterResult, Token
from ..providers.stopwords import FileStopwordProvider
from ..scoring.normalize import get_normalizer
from ..scoring.quality import QualityScorer
from ..segmenters.commas import CommaSplitter
from .emission import EmissionController


class SentenceGate:
    """
    Segments documents into sentences and drops low-information ones.

    The gate is shared across documents. Each document gets its own
    ``EmissionController``, which borrows the stopword set that is current
    when the document starts; a reload in the meantime does not affect it.
    """

    def __init__(self, *, config: GateConfig,
                 provider: Optional[StopwordProvider] = None,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize the gate with configuration and dependencies.

        Args:
            config: Validated gate configuration
            provider: Stopword provider; without one the gate has no stopwords
                and reports ``stopwords_missing``
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.config = config
        self.log = logger
        self.meter = meter
        self.normalizer = get_normalizer(config.normalization)
        if provider is None:
            provider = FileStopwordProvider(None, normalizer=self.normalizer, logger=logger)
        self.provider = provider
        self.splitter = CommaSplitter(config.comma_word_threshold)

    @classmethod
    def from_config(cls, config: GateConfig, *,
                    base_dir: Optional[Union[str, Path]] = None,
                    logger: Optional[Logger] = None,
                    meter: Optional[Meter] = None) -> "SentenceGate":
        """
        Build a gate whose stopwords come from ``config.stopword_source``.

        Raises:
            StopwordLoadError: If a configured stopword file cannot be read
        """
        provider = FileStopwordProvider(config.stopword_source,
                                        ignore_case=config.ignore_case,
                                        base_dir=base_dir,
                                        normalizer=get_normalizer(config.normalization),
                                        logger=logger)
        return cls(config=config, provider=provider, logger=logger, meter=meter)

    def reload(self) -> int:
        """Reload stopwords through the provider; returns the new set size."""
        words = self.provider.reload()
        if self.log:
            self.log.info("stopwords_reloaded", count=len(words))
        return len(words)

    def create(self, text: str, offset_corrector: Optional[OffsetCorrector] = None) -> EmissionController:
        """Create the token stream for one document."""
        scorer = QualityScorer(self.provider.current(), self.normalizer)
        return EmissionController(
            text,
            scorer=scorer,
            splitter=self.splitter,
            filter_enabled=self.config.filter_enabled,
            max_stopword_ratio=self.config.max_stopword_ratio,
            min_sentence_length=self.config.min_sentence_length,
            offset_corrector=offset_corrector,
            logger=self.log,
            meter=self.meter,
        )

    def tokenize(self, text: str) -> List[Token]:
        """Return all emitted tokens of a document."""
        return list(self.create(text))

    def segment(self, text: str) -> List[str]:
        """Return the emitted sentence texts of a document."""
        return [token.text for token in self.create(text)]

    def filter_text(self, text: str) -> FilterResult:
        """
        Run a document through the gate and summarize the outcome.

        Args:
            text: Complete document text

        Returns:
            FilterResult: Kept text, tokens and emit/skip counts
        """
        stream = self.create(text)
        tokens = list(stream)
        return FilterResult(
            kept_text="".join(token.text for token in tokens),
            tokens=tokens,
            emitted=stream.emitted,
            skipped=stream.skipped,
            end_offset=stream.end(),
            skipped_spans=list(stream.skipped_spans),
        )
