"""
Binary format of compiled dictionaries.

All integers are little-endian. Strings are a uint16 byte length followed
by UTF-8. Layout:

    header      4s magic "KLHY", uint8 format version
    kind        string ("standard" or "extended")
    language    string (hyph-utf8 code)
    normalize   string (normalization form)
    minima      uint8 left, uint8 right
    tallies     uint32 count, then per tally:
                    uint8 n, n x uint8 scores
                    extended only: uint8 has_subregion, [subregion, uint8 breakpoint]
    exceptions  uint32 count, words in sorted order, per word:
                    string word, uint16 n, n x (uint32 offset
                    extended only: uint8 has_subregion, [subregion])
    patterns    uint32 length, marisa-trie bytes

    subregion   uint16 left, uint16 right, uint16 breakpoint, string substitution

Identical dictionaries always serialize to identical bytes.
"""

import struct
from pathlib import Path
from typing import Any, List, NamedTuple, Optional, Tuple

from kl_hyphenate.errors import DictionaryIOError, SerializationError
from kl_hyphenate.extended import ExtendedTally, Subregion

MAGIC = b"KLHY"
FORMAT_VERSION = 1

STANDARD = "standard"
EXTENDED = "extended"


class Artifact(NamedTuple):
    """Decoded contents of a dictionary file."""
    kind: str
    language: str
    normalization: str
    minima: Tuple[int, int]
    tallies: List[Any]
    exceptions: dict
    patterns: bytes


class _Writer:
    def __init__(self):
        self.buffer = bytearray()

    def pack(self, fmt: str, *values) -> None:
        try:
            self.buffer += struct.pack(fmt, *values)
        except struct.error as exc:
            raise SerializationError(f"cannot encode {values!r} as {fmt!r}: {exc}") from exc

    def string(self, text: str) -> None:
        raw = text.encode("utf-8")
        self.pack("<H", len(raw))
        self.buffer += raw

    def blob(self, raw: bytes) -> None:
        self.pack("<I", len(raw))
        self.buffer += raw

    def subregion(self, subregion: Optional[Subregion]) -> None:
        if subregion is None:
            self.pack("<B", 0)
            return
        self.pack("<BHHH", 1, subregion.left, subregion.right, subregion.breakpoint)
        self.string(subregion.substitution)


class _Reader:
    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def unpack(self, fmt: str) -> tuple:
        size = struct.calcsize(fmt)
        if self.offset + size > len(self.data):
            raise SerializationError(f"truncated dictionary at byte {self.offset}")
        values = struct.unpack_from(fmt, self.data, self.offset)
        self.offset += size
        return values

    def take(self, size: int) -> bytes:
        if self.offset + size > len(self.data):
            raise SerializationError(f"truncated dictionary at byte {self.offset}")
        raw = self.data[self.offset:self.offset + size]
        self.offset += size
        return raw

    def string(self) -> str:
        (length,) = self.unpack("<H")
        try:
            return self.take(length).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SerializationError(f"invalid UTF-8 in dictionary: {exc}") from exc

    def blob(self) -> bytes:
        (length,) = self.unpack("<I")
        return self.take(length)

    def subregion(self) -> Optional[Subregion]:
        (flag,) = self.unpack("<B")
        if not flag:
            return None
        left, right, breakpoint = self.unpack("<HHH")
        return Subregion(left, right, self.string(), breakpoint)


def encode(dictionary) -> bytes:
    """Serialize a Standard or Extended dictionary."""
    extended = dictionary.kind == EXTENDED
    out = _Writer()
    out.pack("<4sB", MAGIC, FORMAT_VERSION)
    out.string(dictionary.kind)
    out.string(dictionary.language.code)
    out.string(dictionary.normalization.value)
    out.pack("<BB", *dictionary.minima)

    tallies = dictionary.patterns.tallies
    out.pack("<I", len(tallies))
    for tally in tallies:
        scores = tally.scores if extended else tally
        out.pack("<B", len(scores))
        out.pack(f"<{len(scores)}B", *scores)
        if extended:
            out.subregion(tally.subregion)
            if tally.subregion is not None:
                out.pack("<B", tally.breakpoint)

    words = sorted(dictionary.exceptions.items())
    out.pack("<I", len(words))
    for word, ops in words:
        out.string(word)
        out.pack("<H", len(ops))
        for op in ops:
            if extended:
                position, subregion = op
                out.pack("<I", position)
                out.subregion(subregion)
            else:
                out.pack("<I", op)

    out.blob(dictionary.patterns.tobytes())
    return bytes(out.buffer)


def decode(data: bytes) -> Artifact:
    """Parse dictionary bytes into their parts."""
    src = _Reader(data)
    magic, version = src.unpack("<4sB")
    if magic != MAGIC:
        raise SerializationError("not a kl-hyphenate dictionary")
    if version != FORMAT_VERSION:
        raise SerializationError(f"unsupported dictionary format version {version}")

    kind = src.string()
    if kind not in (STANDARD, EXTENDED):
        raise SerializationError(f"unknown dictionary kind {kind!r}")
    extended = kind == EXTENDED
    language = src.string()
    normalization = src.string()
    minima = src.unpack("<BB")

    tallies = []
    (count,) = src.unpack("<I")
    for _ in range(count):
        (length,) = src.unpack("<B")
        scores = src.unpack(f"<{length}B")
        if extended:
            subregion = src.subregion()
            breakpoint = src.unpack("<B")[0] if subregion is not None else 0
            tallies.append(ExtendedTally(scores, subregion, breakpoint))
        else:
            tallies.append(scores)

    exceptions = {}
    (count,) = src.unpack("<I")
    for _ in range(count):
        word = src.string()
        (length,) = src.unpack("<H")
        ops = []
        for _ in range(length):
            (position,) = src.unpack("<I")
            ops.append((position, src.subregion()) if extended else position)
        exceptions[word] = ops

    patterns = src.blob()
    if src.offset != len(data):
        raise SerializationError(f"{len(data) - src.offset} trailing bytes after dictionary")
    return Artifact(kind, language, normalization, tuple(minima), tallies, exceptions, patterns)


def dump(dictionary, path: Path) -> int:
    """
    Write a dictionary to ``path``.

    Returns:
        The number of bytes written
    """
    data = encode(dictionary)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise DictionaryIOError(f"cannot write dictionary to {path}: {exc}") from exc
    return len(data)


def load(path: Path) -> Artifact:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DictionaryIOError(f"cannot read dictionary from {path}: {exc}") from exc
    return decode(data)
