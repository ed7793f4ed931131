"""
Languages with hyphenation patterns.

Each language is identified by its hyph-utf8 code, which names both the
pattern sources (``hyph-<code>.pat.txt``) and the compiled dictionaries
(``<code>.standard.bin``). The minima are the number of characters that
must stay unbroken at the start and end of a word (TeX's lefthyphenmin and
righthyphenmin).
"""

from enum import Enum
from typing import Tuple


class Language(Enum):
    AFRIKAANS = "af"
    ARMENIAN = "hy"
    ASSAMESE = "as"
    BASQUE = "eu"
    BELARUSIAN = "be"
    BENGALI = "bn"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE = "zh-latn-pinyin"
    COPTIC = "cop"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH_GB = "en-gb"
    ENGLISH_US = "en-us"
    ESPERANTO = "eo"
    ESTONIAN = "et"
    ETHIOPIC = "mul-ethi"
    FINNISH = "fi"
    FRENCH = "fr"
    FRIULAN = "fur"
    GALICIAN = "gl"
    GEORGIAN = "ka"
    GERMAN_1901 = "de-1901"
    GERMAN_1996 = "de-1996"
    GERMAN_SWISS = "de-ch-1901"
    GREEK_ANCIENT = "grc"
    GREEK_MONO = "el-monoton"
    GREEK_POLY = "el-polyton"
    GUJARATI = "gu"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    INTERLINGUA = "ia"
    IRISH = "ga"
    ITALIAN = "it"
    KANNADA = "kn"
    KURMANJI = "kmr"
    LATIN = "la"
    LATIN_CLASSIC = "la-x-classic"
    LATIN_LITURGICAL = "la-x-liturgic"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAYALAM = "ml"
    MARATHI = "mr"
    MONGOLIAN = "mn-cyrl"
    NORWEGIAN_BOKMAL = "nb"
    NORWEGIAN_NYNORSK = "nn"
    OCCITAN = "oc"
    ORIYA = "or"
    PALI = "pi"
    PANJABI = "pa"
    PIEDMONTESE = "pms"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    ROMANSH = "rm"
    RUSSIAN = "ru"
    SANSKRIT = "sa"
    SERBIAN_CYRILLIC = "sr-cyrl"
    SERBOCROATIAN_CYRILLIC = "sh-cyrl"
    SERBOCROATIAN_LATIN = "sh-latn"
    SLAVONIC_CHURCH = "cu"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TURKISH = "tr"
    TURKMEN = "tk"
    UKRAINIAN = "uk"
    UPPERSORBIAN = "hsb"
    WELSH = "cy"

    @property
    def code(self) -> str:
        return self.value

    @property
    def minima(self) -> Tuple[int, int]:
        """Unbreakable characters at the (start, end) of a word."""
        return MINIMA.get(self, DEFAULT_MINIMA)

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Look up a language by its hyph-utf8 code (case-insensitive)."""
        try:
            return cls(code.lower())
        except ValueError:
            raise ValueError(f"unknown language code: {code!r}") from None


DEFAULT_MINIMA = (2, 2)

# Languages whose minima differ from (2, 2)
MINIMA = {
    Language.AFRIKAANS: (1, 2),
    Language.ARMENIAN: (1, 2),
    Language.ASSAMESE: (1, 1),
    Language.BENGALI: (1, 1),
    Language.CHINESE: (1, 1),
    Language.COPTIC: (1, 1),
    Language.CZECH: (2, 3),
    Language.ENGLISH_GB: (2, 3),
    Language.ENGLISH_US: (2, 3),
    Language.ESTONIAN: (2, 3),
    Language.ETHIOPIC: (1, 1),
    Language.GEORGIAN: (1, 2),
    Language.GREEK_ANCIENT: (1, 1),
    Language.GREEK_MONO: (1, 1),
    Language.GREEK_POLY: (1, 1),
    Language.GUJARATI: (1, 1),
    Language.HINDI: (1, 1),
    Language.IRISH: (2, 3),
    Language.KANNADA: (1, 1),
    Language.MALAYALAM: (1, 1),
    Language.MARATHI: (1, 1),
    Language.ORIYA: (1, 1),
    Language.PALI: (1, 2),
    Language.PANJABI: (1, 1),
    Language.PORTUGUESE: (2, 3),
    Language.SANSKRIT: (1, 3),
    Language.SLAVONIC_CHURCH: (1, 2),
    Language.SLOVAK: (2, 3),
    Language.TAMIL: (1, 1),
    Language.TELUGU: (1, 1),
    Language.THAI: (2, 3),
    Language.WELSH: (2, 3),
}

# Languages built with extended (orthography-changing) patterns
EXTENDED_LANGUAGES = (Language.CATALAN, Language.HUNGARIAN)
