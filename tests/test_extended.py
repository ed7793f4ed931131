from kl_hyphenate import Extended, Language, Subregion, Word

from conftest import EXTENDED_PATTERNS

SSZ = Subregion(left=1, right=2, substitution="szsz", breakpoint=2)


def test_break_carries_its_spelling_change(extended):
    word = extended.hyphenate("asszony")
    assert word.breaks == [(2, SSZ)]
    assert word.segments() == ["asz", "szony"]
    assert word.join() == "asz-szony"


def test_multibyte_region(extended):
    word = extended.hyphenate("Col·lega")
    assert word.breaks == [(3, Subregion(1, 3, "ll", 1))]
    assert word.join() == "Col-lega"


def test_subregion_apply():
    assert SSZ.apply("asszony", 2) == ("asz", "szony")


def test_stronger_pattern_clears_the_subregion():
    dictionary = Extended.build(Language.HUNGARIAN, EXTENDED_PATTERNS + ["s3s"], minima=(1, 1))
    assert dictionary.hyphenate("asszony").breaks == [(2, None)]
    assert dictionary.hyphenate("asszony").join() == "as-szony"


def test_plain_extended_patterns():
    dictionary = Extended.build(Language.CATALAN, ["a1b"], minima=(1, 1))
    assert dictionary.hyphenate("ab").breaks == [(1, None)]


def test_soft_hyphens(extended):
    assert extended.hyphenate("asz\u00adszony").breaks == [(3, None)]


def test_exact_hyphenations(extended):
    assert extended.add_exact("asszony", [(2, None)]) is None
    assert extended.hyphenate("asszony").breaks == [(2, None)]
    assert extended.add_exact("asszony", [(2, SSZ)]) == [(2, None)]
    assert extended.opportunities("asszony") == [(2, SSZ)]


def test_segments_of_extended_word():
    word = Word("asszonyok", [(2, SSZ), (7, None)])
    assert word.segments() == ["asz", "szony", "ok"]


def test_segments_skip_breaks_inside_a_rewritten_region():
    word = Word("asszony", [(2, SSZ), (3, None)])
    assert word.segments() == ["asz", "szony"]
