import json

from kl_hyphenate import Language
from kl_hyphenate.cli import main, word_to_dict
from kl_hyphenate.config import DICTIONARIES_ENV
from kl_hyphenate.dictionary import dictionary_filename


def test_plain_output(tmp_path, english, capsys):
    path = tmp_path / "english.bin"
    english.save(path)
    assert main(["--dictionary", str(path), "hyphenation", "table"]) == 0
    assert capsys.readouterr().out.splitlines() == ["hy-phen-ation", "ta-ble"]


def test_mark_and_language(tmp_path, extended, monkeypatch, capsys):
    extended.save(tmp_path / dictionary_filename(Language.HUNGARIAN, "extended"))
    monkeypatch.setenv(DICTIONARIES_ENV, str(tmp_path))
    assert main(["-l", "hu", "--extended", "--mark", "=", "asszony"]) == 0
    assert capsys.readouterr().out.strip() == "asz=szony"


def test_json_output(tmp_path, extended, capsys):
    path = tmp_path / "hu.bin"
    extended.save(path)
    assert main(["-x", "-d", str(path), "--json", "asszony"]) == 0
    words = json.loads(capsys.readouterr().out)
    assert words == [{
        "text": "asszony",
        "breaks": [{
            "position": 2,
            "subregion": {"left": 1, "right": 2, "substitution": "szsz", "breakpoint": 2},
        }],
        "segments": ["asz", "szony"],
    }]


def test_word_to_dict_standard(english):
    assert word_to_dict(english.hyphenate("hyphenation")) == {
        "text": "hyphenation",
        "breaks": [2, 6],
        "segments": ["hy", "phen", "ation"],
    }


def test_missing_dictionary(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(DICTIONARIES_ENV, str(tmp_path))
    assert main(["hyphenation"]) == 1
    assert capsys.readouterr().err.startswith("Error: No standard dictionary for en-us")


def test_wrong_kind_of_dictionary(tmp_path, english, capsys):
    path = tmp_path / "english.bin"
    english.save(path)
    assert main(["--extended", "--dictionary", str(path), "word"]) == 1
    assert "not a extended dictionary: standard" in capsys.readouterr().err
