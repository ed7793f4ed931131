from kl_hyphenate import Extended, Standard
from kl_hyphenate.build import build_all, main
from kl_hyphenate.config import SOURCE_ENV, BuildConfig
from kl_hyphenate.language import Language


def test_build_command(patterns_source):
    assert main(["--source", str(patterns_source), "-l", "en-us", "-e", "hu"]) == 0

    standard = Standard.load(patterns_source / "dictionaries" / "en-us.standard.bin")
    assert standard.unbreakable_chars() == (2, 3)
    assert standard.hyphenate("hyphenation").join() == "hy-phen-ation"
    assert standard.hyphenate("table").breaks == [2]
    assert standard.opportunities("associate") == [2, 4]

    extended = Extended.load(patterns_source / "dictionaries" / "hu.extended.bin")
    assert extended.hyphenate("asszony").join() == "asz-szony"


def test_build_all_writes_every_dictionary(patterns_source, tmp_path):
    config = BuildConfig(
        source=patterns_source,
        output=tmp_path / "out",
        languages=(Language.ENGLISH_US,),
        extended_languages=(Language.HUNGARIAN,),
    )
    written = build_all(config)
    assert written == [
        tmp_path / "out" / "en-us.standard.bin",
        tmp_path / "out" / "hu.extended.bin",
    ]
    assert all(path.exists() for path in written)


def test_missing_exceptions_are_tolerated(patterns_source):
    (patterns_source / "patterns" / "hyph-en-us.hyp.txt").unlink()
    assert main(["--source", str(patterns_source), "-l", "en-us", "-e", "hu"]) == 0
    standard = Standard.load(patterns_source / "dictionaries" / "en-us.standard.bin")
    assert len(standard.exceptions) == 0


def test_missing_patterns_abort_the_build(patterns_source):
    assert main(["--source", str(patterns_source), "-l", "de-1996", "-e", "hu"]) == 1


def test_malformed_pattern_aborts_the_build(patterns_source):
    path = patterns_source / "patterns" / "hyph-en-us.pat.txt"
    path.write_text("hy3ph\n42\n", encoding="utf-8")
    assert main(["--source", str(patterns_source), "-l", "en-us", "-e", "hu"]) == 1


def test_source_from_environment(patterns_source, monkeypatch):
    monkeypatch.setenv(SOURCE_ENV, str(patterns_source))
    assert main(["-l", "en-us", "-e", "hu", "-n", "nfc"]) == 0
    standard = Standard.load(patterns_source / "dictionaries" / "en-us.standard.bin")
    assert standard.normalization.value == "nfc"


def test_missing_source(monkeypatch):
    monkeypatch.delenv(SOURCE_ENV, raising=False)
    assert main(["-l", "en-us"]) == 1
