"""
Liang's scoring of a word against a pattern index.

The word is padded with '.' boundary markers and every pattern matching
anywhere in it overlays its tally onto the gaps it spans. A gap keeps the
greatest value any pattern gave it; an odd final value is a break.

Gap ``j`` of the score buffer is the gap before character ``j + 1`` of the
word, so a word of n characters has n - 1 scores.
"""

from typing import Iterator, List, Optional, Tuple

from kl_hyphenate.characters import byte_offsets
from kl_hyphenate.extended import Subregion
from kl_hyphenate.patterns import ExtendedPatterns, Patterns

BOUNDARY = "."


def denotes_opportunity(value: int) -> bool:
    return value % 2 == 1


def _matches(patterns: Patterns, word: str) -> Iterator[Tuple[int, object]]:
    """(start in the padded word, tally) for every matching pattern."""
    padded = BOUNDARY + word + BOUNDARY
    for start in range(len(padded) - 1):
        for tally in patterns.prefix_tallies(padded[start:]):
            yield start, tally


def _gap(start: int, index: int, length: int) -> Optional[int]:
    # position start + index of the padded word sits before word char start + index - 1;
    # only gaps strictly inside the word can be scored
    k = start + index
    if 2 <= k <= length:
        return k - 2
    return None


def score(patterns: Patterns, word: str) -> List[int]:
    """Per-gap maximum of all pattern values for a lowercase word."""
    length = len(word)
    values = [0] * max(length - 1, 0)
    if not values:
        return values

    for start, tally in _matches(patterns, word):
        for index, value in enumerate(tally):
            j = _gap(start, index, length)
            if j is not None and value > values[j]:
                values[j] = value
    return values


def score_extended(
    patterns: ExtendedPatterns, word: str
) -> List[Tuple[int, Optional[Subregion]]]:
    """
    Like score(), also tracking the subregion that set each maximum.

    A subregion belongs to the gap at its tally's breakpoint; any pattern
    that raises that gap further replaces it.
    """
    length = len(word)
    values = [0] * max(length - 1, 0)
    subregions: List[Optional[Subregion]] = [None] * len(values)
    if not values:
        return []

    for start, tally in _matches(patterns, word):
        for index, value in enumerate(tally.scores):
            j = _gap(start, index, length)
            if j is None or value <= values[j]:
                continue
            values[j] = value
            if tally.subregion is not None and index == tally.breakpoint:
                subregions[j] = tally.subregion
            else:
                subregions[j] = None
    return list(zip(values, subregions))


def opportunities_within(patterns: Patterns, word: str, bounds: Tuple[int, int]) -> List[int]:
    """Byte offsets in ``word`` with an odd score, inside ``bounds`` (inclusive)."""
    left, right = bounds
    offsets = byte_offsets(word)
    return [
        offsets[j + 1]
        for j, value in enumerate(score(patterns, word))
        if denotes_opportunity(value) and left <= offsets[j + 1] <= right
    ]


def extended_opportunities_within(
    patterns: ExtendedPatterns, word: str, bounds: Tuple[int, int]
) -> List[Tuple[int, Optional[Subregion]]]:
    left, right = bounds
    offsets = byte_offsets(word)
    return [
        (offsets[j + 1], subregion)
        for j, (value, subregion) in enumerate(score_extended(patterns, word))
        if denotes_opportunity(value) and left <= offsets[j + 1] <= right
    ]
