"""
Errors raised while compiling and loading hyphenation dictionaries.

Hyphenating a word never raises: an unknown or very short word simply has
no break opportunities. Everything here belongs to the offline build or to
dictionary loading.
"""


class HyphenationError(Exception):
    """Base class for all kl-hyphenate errors."""
    pass


class BuildError(HyphenationError):
    """Raised when a pattern index cannot be constructed."""
    pass


class ConfigurationError(HyphenationError):
    """Raised when the build environment or configuration is missing or invalid."""
    pass


class DictionaryIOError(HyphenationError):
    """Raised when a pattern source or dictionary artifact cannot be read or written."""
    pass


class SerializationError(HyphenationError):
    """Raised when a dictionary artifact cannot be encoded or decoded."""
    pass


class ResourceError(HyphenationError):
    """Raised when a dictionary is not available for the requested language."""

    def __init__(self, message: str = "dictionary could not be embedded"):
        super().__init__(message)
