"""Protocol interfaces for dependency injection from the host pipeline."""

from typing import Protocol, List, Any, Callable, Iterator

# Maps a buffer offset to the matching offset in the original input
OffsetCorrector = Callable[[int], int]

class StopwordLookup(Protocol):
    """Read-only set of normalized stopwords."""

    def __contains__(self, word: object) -> bool:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[str]:
        ...

class StopwordProvider(Protocol):
    """Host-injected stopword source. Implement with files, a database, a static list, etc."""

    def current(self) -> StopwordLookup:
        """
        Return the stopword set in effect right now.

        Returns:
            StopwordLookup: Immutable set shared by all documents until the next reload
        """
        ...

    def reload(self) -> StopwordLookup:
        """
        Rebuild the stopword set and swap it in as a whole.

        Returns:
            StopwordLookup: The newly installed set
        """
        ...

class Segmenter(Protocol):
    """Anything that turns a text into a list of segments."""

    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences or clauses.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of text segments
        """
        ...

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level event with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level event with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level event with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
