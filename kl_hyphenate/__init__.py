"""
kl-hyphenate: Knuth-Liang hyphenation

Finds the places where a word may be hyphenated, using the hyphenation
patterns of TeX (hyph-utf8) compiled into compact binary dictionaries.

Basic Usage:
    import kl_hyphenate
    from kl_hyphenate import Language

    word = kl_hyphenate.hyphenate("hyphenation", Language.ENGLISH_US)
    word.breaks         # byte offsets, e.g. [2, 6]
    word.join("-")      # "hy-phen-ation"

Dictionaries are built once with ``python -m kl_hyphenate.build``.
"""

from kl_hyphenate.dictionary import (
    Extended,
    Standard,
    is_dictionary_loaded,
    load_dictionary,
    unload_dictionaries,
)
from kl_hyphenate.errors import (
    BuildError,
    ConfigurationError,
    DictionaryIOError,
    HyphenationError,
    ResourceError,
    SerializationError,
)
from kl_hyphenate.extended import Subregion
from kl_hyphenate.hyphenator import Word, soft_hyphen_indices
from kl_hyphenate.language import Language
from kl_hyphenate.normalization import Normalization
from kl_hyphenate.sync import SharedDictionary

__version__ = "0.1.0"


def hyphenate(word: str, language: Language = Language.ENGLISH_US) -> Word:
    """
    Hyphenate a word with the standard dictionary of ``language``.

    The dictionary is loaded on first use and cached.

    Raises:
        ResourceError: If no dictionary has been built for the language
    """
    return load_dictionary(language).hyphenate(word)


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Dictionaries
    "Standard",
    "Extended",
    "SharedDictionary",
    "load_dictionary",
    "is_dictionary_loaded",
    "unload_dictionaries",
    # Data classes
    "Word",
    "Subregion",
    "Language",
    "Normalization",
    # API
    "hyphenate",
    "soft_hyphen_indices",
    "get_version",
    # Errors
    "HyphenationError",
    "BuildError",
    "ConfigurationError",
    "DictionaryIOError",
    "SerializationError",
    "ResourceError",
    # Version
    "__version__",
]
