"""
Hyphenation of individual words.

For the purpose of hyphenation a "word" is a single run of letters without
intervening punctuation or spaces, not a compound in hyphenated form such
as "hard-nosed".

Breaks are resolved in order of authority:

1. soft hyphens (U+00AD) already present in the word
2. an exact hyphenation registered for the word
3. pattern scoring

Every break is a UTF-8 byte offset into the caller's original text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from kl_hyphenate.case_folding import Shift, realign, refold
from kl_hyphenate.characters import SOFT_HYPHEN, byte_offsets, is_char_boundary
from kl_hyphenate.exception_table import ExceptionTable

Break = TypeVar("Break")


def soft_hyphen_indices(word: str) -> Optional[List[int]]:
    """
    Byte offsets of the soft hyphens in ``word``, or None if it has none.

    Existing soft hyphens indicate a preferred hyphenation, which can be used
    without resorting to the dictionary.
    """
    indices = []
    offset = 0
    for char in word:
        if char == SOFT_HYPHEN:
            indices.append(offset)
        offset += len(char.encode("utf-8"))
    return indices or None


@dataclass(slots=True)
class Word(Generic[Break]):
    """
    A word together with its valid breaks.

    Attributes:
        text: The word as given to ``hyphenate`` (never the folded copy)
        breaks: Strictly increasing byte offsets into ``text``; extended
            dictionaries pair each offset with an optional Subregion
    """
    text: str
    breaks: List[Break]

    def __repr__(self) -> str:
        return f"Word({self.text!r}, breaks={self.breaks!r})"

    def segments(self) -> List[str]:
        """
        The pieces of the word between breaks, soft hyphens removed.

        Spelling changes of extended breaks are applied to both sides.
        """
        raw = self.text.encode("utf-8")
        pieces = []
        start = 0
        carry = ""
        for brk in self.breaks:
            position, subregion = brk if isinstance(brk, tuple) else (brk, None)
            if position < start:
                # inside the region rewritten by the previous break
                continue
            if subregion is None:
                pieces.append(carry + raw[start:position].decode("utf-8"))
                carry = ""
                start = position
            else:
                head, _ = subregion.apply(raw[start:].decode("utf-8"), position - start)
                pieces.append(carry + head)
                carry = subregion.substitution[subregion.breakpoint:]
                start = position + subregion.right
        pieces.append(carry + raw[start:].decode("utf-8"))
        return [piece.replace(SOFT_HYPHEN, "") for piece in pieces]

    def join(self, mark: str = "-") -> str:
        """The hyphenated form of the word, with ``mark`` at every break."""
        return mark.join(self.segments())


class Hyphenator(ABC, Generic[Break]):
    """
    Dictionary-independent hyphenation logic.

    Subclasses provide the pattern scoring and the shape of a break (a bare
    offset, or an offset with a spelling change).
    """

    minima: Tuple[int, int]
    exceptions: ExceptionTable
    _normalize: Optional[Callable[[str], str]] = None

    # -- break shape, provided by subclasses --------------------------------

    @abstractmethod
    def opportunities_within(self, lowercase_word: str, bounds: Tuple[int, int]) -> List[Break]:
        """
        The opportunities that arise between the byte offsets ``bounds``.

        No attempt is made to retrieve a known exact hyphenation.
        """
        raise NotImplementedError

    @abstractmethod
    def _soft_break(self, position: int) -> Break:
        raise NotImplementedError

    @abstractmethod
    def _realigned(self, brk: Break, shifts: List[Shift]) -> Break:
        raise NotImplementedError

    @abstractmethod
    def _position(self, brk: Break) -> int:
        raise NotImplementedError

    # -- shared algorithm ---------------------------------------------------

    def hyphenate(self, word: str) -> Word[Break]:
        """
        Compute the breaks of ``word``. Case-insensitive.

        Soft hyphens take priority over the dictionary; if the word contains
        any, they are returned as the only breaks.
        """
        soft = soft_hyphen_indices(word)
        if soft is not None:
            return Word(word, [self._soft_break(i) for i in soft])

        folded, shifts = refold(word, self._normalize)
        breaks = self.opportunities(folded)
        if shifts:
            bounds = self.boundaries(word)
            if bounds is None:
                return Word(word, [])
            left, right = bounds
            breaks = [self._realigned(brk, shifts) for brk in breaks]
            breaks = [
                brk for brk in breaks
                if left <= self._position(brk) <= right
                and is_char_boundary(word, self._position(brk))
            ]
        return Word(word, breaks)

    def opportunities(self, lowercase_word: str) -> List[Break]:
        """The opportunities the dictionary finds in an already lowercase word."""
        bounds = self.boundaries(lowercase_word)
        if bounds is None:
            return []
        known = self.exact_within(lowercase_word, bounds)
        if known is not None:
            return known
        return self.opportunities_within(lowercase_word, bounds)

    def exact_within(self, lowercase_word: str, bounds: Tuple[int, int]) -> Optional[List[Break]]:
        """The registered hyphenation of the word inside ``bounds``, if any."""
        return self.exceptions.within(lowercase_word, bounds)

    def add_exact(self, word: str, ops: List[Break]) -> Optional[List[Break]]:
        """
        Register the exact hyphenation of ``word``.

        Later calls to ``hyphenate`` and ``opportunities`` use it instead of
        the patterns. Requires exclusive access to the dictionary.

        The word is folded the way ``hyphenate`` folds its input, so "Café"
        and "café" share one entry. ``ops`` are byte offsets into the folded
        word.

        Returns:
            The opportunities previously registered for the word, if any
        """
        folded, _ = refold(word, self._normalize)
        return self.exceptions.insert(folded, ops)

    def unbreakable_chars(self) -> Tuple[int, int]:
        """Characters at the start and end of a word where breaks may not occur."""
        return self.minima

    def boundaries(self, word: str) -> Optional[Tuple[int, int]]:
        """
        Byte offsets delimiting where breaks may occur, or None when the word
        has fewer characters than the two minima together.
        """
        left, right = self.unbreakable_chars()
        offsets = byte_offsets(word)
        length = len(offsets) - 1
        if length < left + right:
            return None
        return offsets[left], offsets[length - right]
