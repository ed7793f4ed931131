"""
Shared access to a dictionary across threads.

Hyphenation only reads a dictionary, so any number of threads may
hyphenate at once. ``add_exact`` mutates the exception table and must run
alone. SharedDictionary enforces that discipline with a readers-writer
lock; waiting writers take priority over new readers.

    shared = SharedDictionary(load_dictionary(Language.ENGLISH_US))
    shared.hyphenate("hyphenation")          # shared access
    shared.add_exact("tabled", [3])          # exclusive access
"""

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from kl_hyphenate.hyphenator import Hyphenator, Word


class ReadWriteLock:
    """Many readers or one writer."""

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._writers_waiting = 0

    @contextmanager
    def reading(self) -> Iterator[None]:
        with self._condition:
            while self._writing or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if not self._readers:
                    self._condition.notify_all()

    @contextmanager
    def writing(self) -> Iterator[None]:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()


class SharedDictionary:
    """A dictionary guarded for concurrent readers and exclusive writers."""

    def __init__(self, dictionary: Hyphenator):
        self._dictionary = dictionary
        self._lock = ReadWriteLock()

    @contextmanager
    def read(self) -> Iterator[Hyphenator]:
        """Shared access; do not mutate the dictionary inside."""
        with self._lock.reading():
            yield self._dictionary

    @contextmanager
    def write(self) -> Iterator[Hyphenator]:
        """Exclusive access."""
        with self._lock.writing():
            yield self._dictionary

    def hyphenate(self, word: str) -> Word:
        with self.read() as dictionary:
            return dictionary.hyphenate(word)

    def opportunities(self, lowercase_word: str) -> List:
        with self.read() as dictionary:
            return dictionary.opportunities(lowercase_word)

    def add_exact(self, word: str, ops: List) -> Optional[List]:
        with self.write() as dictionary:
            return dictionary.add_exact(word, ops)
