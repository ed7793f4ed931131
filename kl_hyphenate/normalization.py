"""
Unicode normalization applied to patterns and words.

The form is chosen once, when a dictionary is built, and recorded in the
compiled artifact; words are folded with the same form at hyphenation time
so that they meet the patterns in the same shape.
"""

import unicodedata
from enum import Enum
from typing import Callable


class Normalization(Enum):
    NONE = "none"
    NFC = "nfc"
    NFD = "nfd"
    NFKC = "nfkc"
    NFKD = "nfkd"

    @property
    def normalize(self) -> Callable[[str], str]:
        """The string transform for this form."""
        if self is Normalization.NONE:
            return _identity
        form = self.name
        return lambda text: unicodedata.normalize(form, text)

    @classmethod
    def from_name(cls, name: str) -> "Normalization":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(n.value for n in cls)
            raise ValueError(f"unknown normalization form {name!r} (expected one of: {choices})") from None


def _identity(text: str) -> str:
    return text
