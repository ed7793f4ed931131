import pytest

from kl_hyphenate import Extended, Language, Standard, unload_dictionaries

# Liang's example patterns for "hy-phen-ation"
HYPHENATION_PATTERNS = [
    "hy3ph",
    "he2n",
    "hena4",
    "hen5at",
    "1na",
    "n2at",
    "1tio",
    "2io",
    "o2n",
]

EXCEPTIONS = [
    "as-so-ciate",
    "ta-ble",
]

EXTENDED_PATTERNS = [
    "s1sz/sz=sz,1,3",
    "l1·l/l=l,1,3",
]


@pytest.fixture(autouse=True)
def _fresh_cache():
    unload_dictionaries()
    yield
    unload_dictionaries()


@pytest.fixture
def english():
    return Standard.build(Language.ENGLISH_US, HYPHENATION_PATTERNS, EXCEPTIONS)


@pytest.fixture
def extended():
    return Extended.build(Language.HUNGARIAN, EXTENDED_PATTERNS, minima=(1, 1))


@pytest.fixture
def patterns_source(tmp_path):
    """A source directory laid out like the hyph-utf8 pattern checkout."""
    patterns = tmp_path / "patterns"
    patterns.mkdir()
    (patterns / "hyph-en-us.pat.txt").write_text(
        "% Liang's example\n\n" + "\n".join(HYPHENATION_PATTERNS) + "\n", encoding="utf-8"
    )
    (patterns / "hyph-en-us.hyp.txt").write_text("\n".join(EXCEPTIONS) + "\n", encoding="utf-8")
    (patterns / "hyph-hu.ext.txt").write_text("\n".join(EXTENDED_PATTERNS) + "\n", encoding="utf-8")
    return tmp_path
