"""Stopword sets and word-list file parsing."""

from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional, Union

import regex

from ..scoring.normalize import Normalizer

# Unescaped commas separate file names; "\," keeps a literal comma
_FILE_SEPARATOR = regex.compile(r"(?<!\\),")
_BOM = "\ufeff"


class StopwordLoadError(Exception):
    """Exception raised when a stopword file cannot be read."""
    pass


class StopwordSet:
    """Immutable set of normalized stopwords."""

    __slots__ = ("_words",)

    def __init__(self, words: FrozenSet[str] = frozenset()):
        self._words = frozenset(words)

    @classmethod
    def empty(cls) -> "StopwordSet":
        return cls()

    @classmethod
    def from_words(cls, words: Iterable[str], ignore_case: bool = True,
                   normalizer: Optional[Normalizer] = None) -> "StopwordSet":
        """
        Build a set, lowercasing entries when ``ignore_case`` is set.

        Entries go through ``normalizer``, which must be the strategy the
        scorer applies to span words. Defaults to ``str.lower``.
        """
        if ignore_case:
            lower = normalizer or str.lower
            return cls(frozenset(lower(w) for w in words))
        return cls(frozenset(words))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StopwordSet):
            return self._words == other._words
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"StopwordSet(size={len(self._words)})"


def split_file_names(source: str) -> List[str]:
    """Split a comma-separated list of file names, honouring ``\\,`` escapes."""
    names = []
    for part in _FILE_SEPARATOR.split(source):
        name = part.replace("\\,", ",").strip()
        if name:
            names.append(name)
    return names


def read_word_lines(path: Path) -> List[str]:
    """
    Read one word per line, skipping blank lines and ``#`` comments.

    Raises:
        StopwordLoadError: If the file cannot be read or decoded
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StopwordLoadError(f"Cannot read stopword file {path}: {e}") from e

    if content.startswith(_BOM):
        content = content[1:]

    words = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        words.append(line)
    return words


def load_word_set(source: str, ignore_case: bool = True,
                  base_dir: Optional[Union[str, Path]] = None,
                  normalizer: Optional[Normalizer] = None) -> StopwordSet:
    """
    Load the union of all word lists named in ``source``.

    Args:
        source: Comma-separated list of word-list files
        ignore_case: Lowercase every entry
        base_dir: Directory that relative file names are resolved against
        normalizer: Lowercasing strategy applied when ``ignore_case`` is set

    Returns:
        StopwordSet: Immutable stopword set

    Raises:
        StopwordLoadError: If any of the files cannot be read
    """
    words: List[str] = []
    for name in split_file_names(source):
        path = Path(name)
        if base_dir is not None and not path.is_absolute():
            path = Path(base_dir) / path
        words.extend(read_word_lines(path))
    return StopwordSet.from_words(words, ignore_case=ignore_case, normalizer=normalizer)
