"""In-memory document buffer with offset correction."""

from typing import Optional

from ..core.abc import OffsetCorrector


def identity_offset(offset: int) -> int:
    return offset


class DocumentBuffer:
    """
    Immutable full text of exactly one document.

    Boundary and comma patterns may look arbitrarily far ahead, so the whole
    document has to be materialized before segmentation starts. Memory use is
    therefore proportional to the document size.
    """

    __slots__ = ("text", "_corrector")

    def __init__(self, text: str, corrector: Optional[OffsetCorrector] = None):
        """
        Args:
            text: Complete document text
            corrector: Maps buffer offsets to offsets in the original input,
                for hosts that rewrite characters before segmentation
        """
        self.text = text
        self._corrector = corrector or identity_offset

    def __len__(self) -> int:
        return len(self.text)

    def clamp(self, offset: int) -> int:
        """Clamp an offset into ``[0, len]``."""
        return max(0, min(offset, len(self.text)))

    def slice(self, start: int, end: int) -> str:
        return self.text[self.clamp(start):self.clamp(end)]

    def correct_offset(self, offset: int) -> int:
        """Map a buffer offset back to the original input coordinate space."""
        return self._corrector(self.clamp(offset))
