"""
Pattern index: deduplicated tallies behind a marisa-trie.

Natural-language pattern sets repeat the same tally many times, so each
distinct tally is stored once and patterns refer to it by a 16-bit id. The
trie maps every pattern key to that id:

    key ("hy", ".ab", ...) -> [(tally_id,)]
"""

import logging
import struct
from typing import Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

import marisa_trie

from kl_hyphenate.errors import BuildError
from kl_hyphenate.extended import ExtendedTally

logger = logging.getLogger(__name__)

# Each trie record is a single unsigned 16-bit tally id
RECORD_FORMAT = "<H"
MAX_TALLIES = 1 << 16

T = TypeVar("T", bound=Hashable)


def uniques(pairs: Iterable[Tuple[str, T]]) -> Tuple[List[Tuple[str, int]], List[T]]:
    """
    Deduplicate tallies and order the pattern keys.

    Tally ids are assigned in first-seen order. Keys are sorted; when a key
    occurs more than once, its earliest occurrence wins.

    Returns:
        (sorted (key, tally_id) pairs, tally store indexed by id)
    """
    kvs = []
    tally_ids = {}
    tallies: List[T] = []
    for key, tally in pairs:
        tally_id = tally_ids.get(tally)
        if tally_id is None:
            tally_id = len(tallies)
            tallies.append(tally)
            tally_ids[tally] = tally_id
        kvs.append((key, tally_id))

    # sort is stable, so the first of equal keys is the earliest one
    kvs.sort(key=lambda kv: kv[0])
    deduped: List[Tuple[str, int]] = []
    for key, tally_id in kvs:
        if deduped and deduped[-1][0] == key:
            continue
        deduped.append((key, tally_id))
    return deduped, tallies


class Patterns(Generic[T]):
    """Standard patterns: keys mapped to plain score tuples."""

    def __init__(self, tallies: List[T], automaton: marisa_trie.RecordTrie):
        self.tallies = tallies
        self.automaton = automaton

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, T]]) -> "Patterns[T]":
        """
        Build the index from (key, tally) pairs.

        Raises:
            BuildError: If the tallies overflow 16-bit ids or the trie
                cannot be constructed
        """
        kvs, tallies = uniques(pairs)
        if len(tallies) > MAX_TALLIES:
            raise BuildError(f"{len(tallies)} distinct tallies exceed the {MAX_TALLIES} addressable ids")

        try:
            automaton = marisa_trie.RecordTrie(
                RECORD_FORMAT, ((key, (tally_id,)) for key, tally_id in kvs)
            )
        except (ValueError, TypeError, OverflowError, RuntimeError, struct.error) as exc:
            raise BuildError(f"could not build pattern index: {exc}") from exc

        logger.debug(f"Indexed {len(kvs)} patterns over {len(tallies)} distinct tallies")
        return cls(tallies, automaton)

    @classmethod
    def from_bytes(cls, tallies: List[T], data: bytes) -> "Patterns[T]":
        automaton = marisa_trie.RecordTrie(RECORD_FORMAT)
        automaton.frombytes(data)
        return cls(tallies, automaton)

    def tobytes(self) -> bytes:
        return self.automaton.tobytes()

    def tally_id(self, key: str) -> Optional[int]:
        records = self.automaton.get(key)
        if not records:
            return None
        return records[0][0]

    def tally(self, key: str) -> Optional[T]:
        """The tally of an exact pattern key, if the key is a pattern."""
        tally_id = self.tally_id(key)
        if tally_id is None:
            return None
        return self.tallies[tally_id]

    def prefix_tallies(self, text: str) -> Iterator[T]:
        """Tallies of every pattern that is a prefix of ``text``."""
        for key in self.automaton.prefixes(text):
            yield self.tallies[self.automaton[key][0][0]]

    def keys(self) -> List[str]:
        return sorted(self.automaton.keys())

    def __contains__(self, key: str) -> bool:
        return key in self.automaton

    def __len__(self) -> int:
        return len(self.automaton)


class ExtendedPatterns(Patterns[ExtendedTally]):
    """Patterns whose tallies may carry a spelling change."""
    pass
