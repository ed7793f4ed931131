"""
Hyphenation dictionaries.

A dictionary bundles the pattern index of one language with its exact
hyphenations (exceptions) and minima. Dictionaries are compiled offline
(see ``kl_hyphenate.build``) into one file per language and kind:

    dictionaries/en-us.standard.bin
    dictionaries/hu.extended.bin

and loaded once per process. After loading they are read-only, except for
``add_exact``, which needs exclusive access (see ``kl_hyphenate.sync``).
"""

import logging
import os
import threading
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from kl_hyphenate import serialization
from kl_hyphenate.case_folding import Shift, realign
from kl_hyphenate.config import DICTIONARIES_ENV
from kl_hyphenate.errors import BuildError, ResourceError, SerializationError
from kl_hyphenate.exception_table import ExceptionTable
from kl_hyphenate.extended import Subregion
from kl_hyphenate.hyphenator import Hyphenator
from kl_hyphenate.language import Language
from kl_hyphenate.normalization import Normalization
from kl_hyphenate.parse import parse_exception, parse_extended, parse_pattern, source_lines
from kl_hyphenate.patterns import ExtendedPatterns, Patterns
from kl_hyphenate.score import extended_opportunities_within, opportunities_within

logger = logging.getLogger(__name__)

ExtendedBreak = Tuple[int, Optional[Subregion]]


def _parsed(lines: Iterable[str], parser: Callable, normalize, source: str) -> List[tuple]:
    pairs = []
    for number, text in source_lines(lines):
        try:
            pairs.append(parser(text, normalize))
        except ValueError as exc:
            raise BuildError(f"{source}:{number}: {exc}") from exc
    return pairs


class _Dictionary:
    kind = ""

    def __init__(
        self,
        language: Language,
        patterns: Patterns,
        exceptions: Optional[ExceptionTable] = None,
        minima: Optional[Tuple[int, int]] = None,
        normalization: Normalization = Normalization.NONE,
    ):
        self.language = language
        self.patterns = patterns
        self.exceptions = exceptions if exceptions is not None else ExceptionTable()
        self.minima = tuple(minima) if minima is not None else language.minima
        self.normalization = normalization
        # Resolved once; the hot path never looks at the form again
        self._normalize = None if normalization is Normalization.NONE else normalization.normalize

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.language.code!r}, "
            f"{len(self.patterns)} patterns, {len(self.exceptions)} exceptions, "
            f"minima={self.minima})"
        )

    def save(self, path: Union[str, Path]) -> int:
        """Serialize the dictionary to ``path`` and return its size in bytes."""
        return serialization.dump(self, Path(path))

    @classmethod
    def load(cls, path: Union[str, Path]):
        """
        Read a compiled dictionary.

        Raises:
            DictionaryIOError: If the file cannot be read
            SerializationError: If the file is not a dictionary of this kind
        """
        artifact = serialization.load(Path(path))
        return cls.from_artifact(artifact)

    @classmethod
    def from_artifact(cls, artifact: serialization.Artifact):
        if artifact.kind != cls.kind:
            raise SerializationError(f"not a {cls.kind} dictionary: {artifact.kind}")
        try:
            language = Language.from_code(artifact.language)
            normalization = Normalization.from_name(artifact.normalization)
        except ValueError as exc:
            raise SerializationError(str(exc)) from exc
        patterns_class = ExtendedPatterns if cls.kind == serialization.EXTENDED else Patterns
        return cls(
            language,
            patterns_class.from_bytes(artifact.tallies, artifact.patterns),
            ExceptionTable(artifact.exceptions),
            artifact.minima,
            normalization,
        )


class Standard(_Dictionary, Hyphenator[int]):
    """A dictionary whose breaks are plain byte offsets."""

    kind = serialization.STANDARD

    @classmethod
    def build(
        cls,
        language: Language,
        pattern_lines: Iterable[str],
        exception_lines: Iterable[str] = (),
        normalization: Normalization = Normalization.NONE,
        minima: Optional[Tuple[int, int]] = None,
        pattern_source: str = "<patterns>",
        exception_source: str = "<exceptions>",
    ) -> "Standard":
        """
        Compile a dictionary from pattern and exception source lines.

        Raises:
            BuildError: If a line cannot be parsed or the index cannot be built
        """
        normalize = normalization.normalize
        patterns = Patterns.from_pairs(_parsed(pattern_lines, parse_pattern, normalize, pattern_source))
        exceptions = ExceptionTable(dict(_parsed(exception_lines, parse_exception, normalize, exception_source)))
        return cls(language, patterns, exceptions, minima, normalization)

    def opportunities_within(self, lowercase_word: str, bounds: Tuple[int, int]) -> List[int]:
        return opportunities_within(self.patterns, lowercase_word, bounds)

    def _soft_break(self, position: int) -> int:
        return position

    def _realigned(self, brk: int, shifts: List[Shift]) -> int:
        return realign(brk, shifts)

    def _position(self, brk: int) -> int:
        return brk


class Extended(_Dictionary, Hyphenator[ExtendedBreak]):
    """A dictionary whose breaks may change the spelling around them."""

    kind = serialization.EXTENDED

    @classmethod
    def build(
        cls,
        language: Language,
        pattern_lines: Iterable[str],
        normalization: Normalization = Normalization.NONE,
        minima: Optional[Tuple[int, int]] = None,
        pattern_source: str = "<patterns>",
    ) -> "Extended":
        normalize = normalization.normalize
        patterns = ExtendedPatterns.from_pairs(_parsed(pattern_lines, parse_extended, normalize, pattern_source))
        return cls(language, patterns, ExceptionTable(), minima, normalization)

    def opportunities_within(self, lowercase_word: str, bounds: Tuple[int, int]) -> List[ExtendedBreak]:
        return extended_opportunities_within(self.patterns, lowercase_word, bounds)

    def _soft_break(self, position: int) -> ExtendedBreak:
        return (position, None)

    def _realigned(self, brk: ExtendedBreak, shifts: List[Shift]) -> ExtendedBreak:
        position, subregion = brk
        return (realign(position, shifts), subregion)

    def _position(self, brk: ExtendedBreak) -> int:
        return brk[0]


KINDS = {
    Standard.kind: Standard,
    Extended.kind: Extended,
}


# ============================================================================
# Dictionary Loading
# ============================================================================

# Module-level cache, one dictionary per (language, kind, file)
_DICTIONARIES: Dict[Tuple[Language, str, Path], _Dictionary] = {}
_DICTIONARIES_LOCK = threading.Lock()


def get_dictionaries_path() -> Path:
    """Directory of compiled dictionaries: $KL_HYPHENATE_DICTIONARIES or the package's own."""
    configured = os.environ.get(DICTIONARIES_ENV)
    if configured:
        return Path(configured)
    return Path(__file__).parent / "dictionaries"


def dictionary_filename(language: Language, kind: str = Standard.kind) -> str:
    return f"{language.code}.{kind}.bin"


def is_dictionary_loaded(language: Language, kind: str = Standard.kind) -> bool:
    return any(key[:2] == (language, kind) for key in _DICTIONARIES)


def load_dictionary(
    language: Language,
    kind: str = Standard.kind,
    path: Optional[Path] = None,
):
    """
    Load (once) the compiled dictionary of a language.

    Each file is cached separately, so an explicit ``path`` never returns a
    dictionary loaded from another file.

    Args:
        language: Language to load
        kind: "standard" or "extended"
        path: Dictionary file; defaults to the dictionaries directory

    Raises:
        ResourceError: If no dictionary exists for the language
    """
    if kind not in KINDS:
        raise ValueError(f"unknown dictionary kind: {kind!r}")
    if path is None:
        path = get_dictionaries_path() / dictionary_filename(language, kind)
    path = Path(path).resolve()

    key = (language, kind, path)
    with _DICTIONARIES_LOCK:
        if key in _DICTIONARIES:
            return _DICTIONARIES[key]

        if not path.exists():
            raise ResourceError(
                f"No {kind} dictionary for {language.code} at {path}. "
                "Run 'python -m kl_hyphenate.build' to build it."
            )

        dictionary = KINDS[kind].load(path)
        logger.debug(f"Loaded {dictionary!r} from {path}")
        _DICTIONARIES[key] = dictionary
        return dictionary


def unload_dictionaries():
    """Forget every loaded dictionary."""
    with _DICTIONARIES_LOCK:
        _DICTIONARIES.clear()
