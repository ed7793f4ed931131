"""
Extended hyphenation: breaks that change the spelling around them.

Some orthographies rewrite a word when it is hyphenated (Hungarian "ssz"
becomes "sz-sz", Catalan "l·l" becomes "l-l"). An extended pattern carries a
Subregion describing that rewrite alongside its ordinary scores.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Subregion:
    """
    A spelling change at a break.

    Attributes:
        left: UTF-8 bytes before the break that are replaced
        right: UTF-8 bytes after the break that are replaced
        substitution: Replacement text for the whole region
        breakpoint: Character index in ``substitution`` where the line breaks
    """
    left: int
    right: int
    substitution: str
    breakpoint: int

    def apply(self, text: str, position: int) -> Tuple[str, str]:
        """
        Split ``text`` at byte offset ``position``, rewriting the region.

        Returns:
            (head, tail): the text before the hyphen and the text after it
        """
        raw = text.encode("utf-8")
        head = raw[:position - self.left].decode("utf-8")
        tail = raw[position + self.right:].decode("utf-8")
        return (
            head + self.substitution[:self.breakpoint],
            self.substitution[self.breakpoint:] + tail,
        )


@dataclass(frozen=True, slots=True)
class ExtendedTally:
    """
    Per-gap scores of an extended pattern.

    ``breakpoint`` is the index into ``scores`` that ``subregion`` belongs
    to; it is meaningless when there is no subregion.
    """
    scores: Tuple[int, ...]
    subregion: Optional[Subregion] = None
    breakpoint: int = 0
