"""
Exact hyphenations of whole words.

An exception overrides pattern scoring for one lowercase word. Entries are
byte offsets (plain ints for standard dictionaries, ``(offset, subregion)``
pairs for extended ones) into the folded word.
"""

from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from kl_hyphenate.extended import Subregion

Exact = TypeVar("Exact", int, Tuple[int, Optional[Subregion]])


def _position(op: Union[int, Tuple[int, Optional[Subregion]]]) -> int:
    return op if isinstance(op, int) else op[0]


class ExceptionTable(Generic[Exact]):
    """Mapping of lowercase words to their exact break opportunities."""

    def __init__(self, entries: Optional[Dict[str, List[Exact]]] = None):
        self._entries: Dict[str, List[Exact]] = dict(entries or {})

    def lookup(self, word: str) -> Optional[List[Exact]]:
        """Exact match only; no partial or pattern fallback."""
        return self._entries.get(word)

    def within(self, word: str, bounds: Tuple[int, int]) -> Optional[List[Exact]]:
        """
        The known hyphenation of ``word`` restricted to byte offsets in
        ``bounds`` (inclusive), or None if the word has no entry.
        """
        ops = self._entries.get(word)
        if ops is None:
            return None
        left, right = bounds
        return [op for op in ops if left <= _position(op) <= right]

    def insert(self, word: str, ops: List[Exact]) -> Optional[List[Exact]]:
        """Store ``ops`` for ``word`` and return the entry it replaced."""
        previous = self._entries.get(word)
        self._entries[word] = list(ops)
        return previous

    def items(self) -> Iterator[Tuple[str, List[Exact]]]:
        return iter(self._entries.items())

    def __contains__(self, word: str) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExceptionTable):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"ExceptionTable({len(self._entries)} words)"
