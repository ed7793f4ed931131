"""
Parsing of pattern, exception and extended-pattern source lines.

Patterns use Liang's notation: letters to match with digits scoring the gap
before the next letter, and '.' anchoring the pattern to a word boundary::

    parse_pattern("a1bc3d4")    -> ("abcd", (0, 1, 0, 3, 4))
    parse_pattern(".ab2")       -> (".ab", (0, 0, 0, 2))

Exceptions spell out the breaks of a whole word with hyphens::

    parse_exception("as-so-ciate") -> ("associate", [2, 4])

Extended patterns append a spelling change in the non-standard syntax of
the LibreOffice hyphenator (``pattern/replacement,start,cut``)::

    parse_extended("s1sz/sz=sz,1,3")
"""

import re
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from kl_hyphenate.extended import ExtendedTally, Subregion

Normalizer = Optional[Callable[[str], str]]
Tally = Tuple[int, ...]

# Scores are ASCII digits only; other decimal digits are letters of the key
PATTERN_TOKEN = re.compile(r"([0-9]+)|([^0-9]+)")
COMMENT_PREFIX = "%"


def source_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield (line number, stripped text), skipping blanks and % comments."""
    for number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith(COMMENT_PREFIX):
            continue
        yield number, text


def parse_pattern(line: str, normalize: Normalizer = None) -> Tuple[str, Tally]:
    """
    Split a pattern into its letter key and per-gap tally.

    Letter runs are normalized one at a time, so the tally always holds one
    more entry than the normalized key has characters.
    """
    text = line.strip()
    letters = []
    tally = [0]
    for digits, run in PATTERN_TOKEN.findall(text):
        if digits:
            tally[-1] = int(digits)
        else:
            if normalize is not None:
                run = normalize(run)
            letters.append(run)
            tally.extend([0] * len(run))

    key = "".join(letters)
    if not key:
        raise ValueError(f"pattern has no letters: {line!r}")
    return key, tuple(tally)


def parse_exception(line: str, normalize: Normalizer = None) -> Tuple[str, List[int]]:
    """Parse a hyphenated word into the bare word and its break byte offsets."""
    parts = line.strip().split("-")
    if normalize is not None:
        parts = [normalize(part) for part in parts]
    if any(not part for part in parts):
        raise ValueError(f"malformed exception: {line!r}")

    positions = []
    offset = 0
    for part in parts[:-1]:
        offset += len(part.encode("utf-8"))
        positions.append(offset)
    return "".join(parts), positions


def parse_extended(line: str, normalize: Normalizer = None) -> Tuple[str, ExtendedTally]:
    """
    Parse an extended pattern.

    A line without a '/' is an ordinary pattern and carries no subregion.
    ``start`` counts characters of the key from 1, ignoring a leading '.';
    ``cut`` is the number of characters replaced, all of them by default.
    """
    pattern, sep, rule = line.strip().partition("/")
    key, scores = parse_pattern(pattern, normalize)
    if not sep:
        return key, ExtendedTally(scores)

    fields = rule.split(",")
    replacement = fields[0]
    if normalize is not None:
        replacement = normalize(replacement)
    if replacement.count("=") != 1:
        raise ValueError(f"replacement needs exactly one '=': {line!r}")

    anchor = 1 if key.startswith(".") else 0
    word_length = len(key.strip("."))
    try:
        start = int(fields[1]) if len(fields) > 1 else 1
        cut = int(fields[2]) if len(fields) > 2 else word_length
    except ValueError:
        raise ValueError(f"malformed start or cut: {line!r}") from None
    begin = anchor + start - 1
    end = begin + cut
    if start < 1 or cut < 0 or end > anchor + word_length:
        raise ValueError(f"replaced region lies outside the pattern: {line!r}")

    odd = [i for i in range(begin, end + 1) if scores[i] % 2 == 1]
    if not odd:
        raise ValueError(f"no break inside the replaced region: {line!r}")
    breakpoint = odd[0]

    subregion = Subregion(
        left=len(key[begin:breakpoint].encode("utf-8")),
        right=len(key[breakpoint:end].encode("utf-8")),
        substitution=replacement.replace("=", ""),
        breakpoint=replacement.index("="),
    )
    return key, ExtendedTally(scores, subregion, breakpoint)
