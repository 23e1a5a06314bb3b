"""Pydantic schema for gate configuration."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

DEFAULT_COMMA_WORD_THRESHOLD = 0.2
DEFAULT_MAX_STOPWORD_RATIO = 0.21
DEFAULT_MIN_SENTENCE_LENGTH = 5

Normalization = Literal["german", "root", "turkish", "casefold"]

class GateConfig(BaseModel):
    """Complete configuration for a SentenceGate.

    Every option also accepts the camelCase name used by analyzer-chain
    factories, so a plugin argument map validates unchanged.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    filter_enabled: bool = Field(
        default=False,
        validation_alias=AliasChoices("filter_enabled", "filterEnabled", "filter"),
        description="Drop spans with too many stopwords; if false every span is emitted")
    comma_word_threshold: float = Field(
        default=DEFAULT_COMMA_WORD_THRESHOLD, ge=0.0,
        validation_alias=AliasChoices("comma_word_threshold", "commaWordThreshold"),
        description="Comma-to-word ratio above which a span is split clause by clause")
    max_stopword_ratio: float = Field(
        default=DEFAULT_MAX_STOPWORD_RATIO, ge=0.0, le=1.0,
        validation_alias=AliasChoices("max_stopword_ratio", "maxStopwordRatio"),
        description="Stopword ratio above which a span is filtered out")
    min_sentence_length: int = Field(
        default=DEFAULT_MIN_SENTENCE_LENGTH, ge=0,
        validation_alias=AliasChoices("min_sentence_length", "minSentenceLength"),
        description="Spans with fewer words are always emitted")
    stopword_source: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("stopword_source", "stopwordSource", "stopwordfile"),
        description="Comma-separated list of stopword files")
    ignore_case: bool = Field(
        default=True,
        validation_alias=AliasChoices("ignore_case", "ignoreCase"),
        description="Lowercase stopword entries when loading")
    normalization: Normalization = Field(
        default="german",
        description="Lowercasing strategy applied to span words before stopword lookup")

    def validate_settings(self) -> List[str]:
        """Return soft configuration issues that do not prevent startup."""
        issues = []

        if self.stopword_source is None:
            issues.append("stopword_source is not set; stopword ratio will always be 0")
        elif not self.stopword_source.strip():
            issues.append("stopword_source is empty")

        if not self.filter_enabled and self.stopword_source:
            issues.append("stopword_source is set but filtering is disabled")

        return issues
