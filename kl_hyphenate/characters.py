"""
Character and UTF-8 byte offset helpers.

Break positions are UTF-8 byte offsets, while patterns are matched on
characters; these helpers translate between the two.
"""

from typing import List

SOFT_HYPHEN = "\u00ad"


def utf8_length(text: str) -> int:
    """Number of bytes ``text`` occupies in UTF-8."""
    return len(text.encode("utf-8"))


def byte_offsets(text: str) -> List[int]:
    """
    Byte offset of every character boundary in ``text``.

    ``byte_offsets(text)[i]`` is where character ``i`` starts; the final
    entry is the total length in bytes.
    """
    offsets = [0]
    total = 0
    for char in text:
        total += utf8_length(char)
        offsets.append(total)
    return offsets


def is_char_boundary(text: str, position: int) -> bool:
    """True if byte offset ``position`` does not split a character of ``text``."""
    raw = text.encode("utf-8")
    if position == 0 or position == len(raw):
        return True
    if not 0 < position < len(raw):
        return False
    # UTF-8 continuation bytes look like 0b10xxxxxx
    return (raw[position] & 0xC0) != 0x80
