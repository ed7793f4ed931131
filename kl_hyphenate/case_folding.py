"""
Case folding with offset bookkeeping.

Patterns are lowercase, so words are folded before scoring. Folding can
change a word's UTF-8 length: a dotted capital I lowercases to "i" plus a
combining dot, "ẞ" to "ß", and normalization may compose or decompose
accents. Each such change is recorded as a Shift so that byte offsets
found in the folded word can be mapped back onto the original text.
"""

import unicodedata
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

from kl_hyphenate.characters import utf8_length


class Shift(NamedTuple):
    """
    A length change made by folding.

    Attributes:
        index: Byte offset in the folded text where the changed run ends
        delta: Bytes of the original run minus bytes of its folded form
    """
    index: int
    delta: int


def _runs(text: str) -> Iterator[str]:
    """Split text into base characters, each with its trailing combining marks."""
    start = 0
    for i in range(1, len(text)):
        if not unicodedata.combining(text[i]):
            yield text[start:i]
            start = i
    if text:
        yield text[start:]


def refold(text: str, normalize: Optional[Callable[[str], str]] = None) -> Tuple[str, List[Shift]]:
    """
    Lowercase (and optionally normalize) ``text``.

    Returns:
        (folded text, shifts in ascending index order)
    """
    pieces = []
    shifts = []
    folded_length = 0
    for run in _runs(text):
        folded = run.lower()
        if normalize is not None:
            folded = normalize(folded)
        pieces.append(folded)
        folded_length += utf8_length(folded)
        delta = utf8_length(run) - utf8_length(folded)
        if delta:
            shifts.append(Shift(folded_length, delta))

    if not shifts and normalize is None:
        # Lowercasing the whole word keeps context rules such as final sigma
        return text.lower(), shifts
    return "".join(pieces), shifts


def realign(position: int, shifts: List[Shift]) -> int:
    """
    Map a byte offset in the folded text back to the original text.

    Every shift ending at or before ``position`` contributes its delta;
    shifts sharing an index all apply, in the order they were recorded.
    """
    aligned = position
    for shift in shifts:
        if shift.index > position:
            break
        aligned += shift.delta
    return aligned
