import pytest

import kl_hyphenate
from kl_hyphenate import Language, Normalization, ResourceError, Standard
from kl_hyphenate.config import DICTIONARIES_ENV, NORMALIZATION_ENV, SOURCE_ENV, BuildConfig
from kl_hyphenate.dictionary import dictionary_filename, is_dictionary_loaded, load_dictionary
from kl_hyphenate.errors import BuildError, ConfigurationError


@pytest.fixture
def dictionaries(tmp_path, english, extended, monkeypatch):
    english.save(tmp_path / dictionary_filename(Language.ENGLISH_US))
    extended.save(tmp_path / dictionary_filename(Language.HUNGARIAN, "extended"))
    monkeypatch.setenv(DICTIONARIES_ENV, str(tmp_path))
    return tmp_path


def test_load_dictionary_is_cached(dictionaries):
    assert not is_dictionary_loaded(Language.ENGLISH_US)
    first = load_dictionary(Language.ENGLISH_US)
    assert is_dictionary_loaded(Language.ENGLISH_US)
    assert load_dictionary(Language.ENGLISH_US) is first
    assert load_dictionary(Language.HUNGARIAN, "extended").hyphenate("asszony").join() == "asz-szony"


def test_module_level_hyphenate(dictionaries):
    assert kl_hyphenate.hyphenate("hyphenation").breaks == [2, 6]
    assert kl_hyphenate.hyphenate("hyphenation", Language.ENGLISH_US).join() == "hy-phen-ation"


def test_missing_dictionary(dictionaries):
    with pytest.raises(ResourceError):
        load_dictionary(Language.WELSH)
    with pytest.raises(ValueError):
        load_dictionary(Language.ENGLISH_US, "fancy")


def test_build_errors_name_the_line():
    with pytest.raises(BuildError, match="hyph.pat:2"):
        Standard.build(Language.ENGLISH_US, ["hy3ph", "123"], pattern_source="hyph.pat")


def test_repr(english):
    assert repr(english) == "Standard('en-us', 9 patterns, 2 exceptions, minima=(2, 3))"


def test_language_codes_and_minima():
    assert Language.from_code("EN-US") is Language.ENGLISH_US
    assert Language.ENGLISH_US.minima == (2, 3)
    assert Language.GERMAN_1996.minima == (2, 2)
    assert Language.HINDI.code == "hi"
    with pytest.raises(ValueError):
        Language.from_code("xx")


def test_normalization_strategies():
    assert Normalization.NONE.normalize("e\u0301") == "e\u0301"
    assert Normalization.NFC.normalize("e\u0301") == "\u00e9"
    assert Normalization.NFD.normalize("\u00e9") == "e\u0301"
    assert Normalization.NFKC.normalize("\ufb01") == "fi"
    assert Normalization.from_name(" NFKD ") is Normalization.NFKD
    with pytest.raises(ValueError):
        Normalization.from_name("nfx")


def test_build_config_from_environment(tmp_path):
    config = BuildConfig.from_env({SOURCE_ENV: str(tmp_path)})
    assert config.source == tmp_path
    assert config.output == tmp_path / "dictionaries"
    assert config.normalization is Normalization.NONE
    assert config.source_pattern(Language.ENGLISH_US, "pat") == tmp_path / "patterns" / "hyph-en-us.pat.txt"
    assert config.dest_dict(Language.HUNGARIAN, "extended") == tmp_path / "dictionaries" / "hu.extended.bin"
    assert Language.CATALAN in config.extended_languages

    config = BuildConfig.from_env({SOURCE_ENV: str(tmp_path), NORMALIZATION_ENV: "nfd"}, normalization="nfc")
    assert config.normalization is Normalization.NFC


def test_build_config_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        BuildConfig.from_env({})
    with pytest.raises(ConfigurationError):
        BuildConfig.from_env({SOURCE_ENV: str(tmp_path), NORMALIZATION_ENV: "nfx"})


def test_each_dictionary_file_is_cached_separately(dictionaries, tmp_path):
    other_path = tmp_path / "other.bin"
    Standard.build(Language.ENGLISH_US, ["hy3ph"]).save(other_path)

    default = load_dictionary(Language.ENGLISH_US)
    other = load_dictionary(Language.ENGLISH_US, path=other_path)
    assert other is not default
    assert other.hyphenate("hyphenation").breaks == [2]
    assert load_dictionary(Language.ENGLISH_US, path=other_path) is other
    assert load_dictionary(Language.ENGLISH_US) is default
