"""Deterministic sentence-boundary scanner."""

import regex

from .buffer import DocumentBuffer

# Terminal punctuation, then whitespace, then an upper-case letter in any script.
# The whitespace belongs to the preceding sentence.
SENTENCE_BOUNDARY = regex.compile(r"(?<=[.?!|;\-])\s+(?=\p{Lu})")


class BoundaryScanner:
    """
    Finds the end of the sentence that starts at a given index.

    Each call searches forward from the cursor it is given, so walking a
    document from start to end scans every character only once.
    """

    def __init__(self, buffer: DocumentBuffer):
        self.buffer = buffer

    def next_end(self, start: int) -> int:
        """
        Return the end offset of the candidate sentence starting at ``start``.

        Args:
            start: Buffer offset to search from

        Returns:
            int: Offset right after the whitespace of the next boundary, or
                the buffer length if no boundary follows
        """
        text = self.buffer.text
        start = self.buffer.clamp(start)
        match = SENTENCE_BOUNDARY.search(text, start)
        if match is None:
            return len(text)
        return match.end()
