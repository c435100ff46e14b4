# tests/test_sources.py
import json

import pytest

from lexicon_engine import Lexicon, LoadError
from lexicon_engine.data.sources import (
    load_dictionary,
    merge_letter_files,
    read_csv_pairs,
    read_json_pairs,
    read_pairs,
)

CSV_TEXT = (
    "apple,a fruit\n"
    "Apply,to request,formally\n"
    ",blank word\n"
    "  ,also blank\n"
    "\n"
    "app\n"
    '"pear","a ""soft"" fruit"\n'
)


@pytest.fixture
def csv_file(tmp_path):
    p = tmp_path / "dictionary.csv"
    p.write_text(CSV_TEXT, encoding="utf-8")
    return p


def test_csv_rows_to_pairs(csv_file):
    assert list(read_csv_pairs(csv_file)) == [
        ("apple", "a fruit"),
        ("Apply", "to request formally"),
        ("app", ""),
        ("pear", 'a "soft" fruit'),
    ]


def test_csv_with_byte_order_mark(tmp_path):
    p = tmp_path / "bom.csv"
    p.write_text("apple,a fruit\n", encoding="utf-8-sig")
    assert list(read_csv_pairs(p)) == [("apple", "a fruit")]


def test_missing_csv_raises_load_error(tmp_path):
    with pytest.raises(LoadError) as exc:
        list(read_csv_pairs(tmp_path / "nope.csv"))
    assert exc.value.path.endswith("nope.csv")


def test_json_entries(tmp_path):
    p = tmp_path / "words.json"
    p.write_text(json.dumps([
        {"word": " Apple ", "definition": " a fruit "},
        {"word": ""},
        "junk",
        {"word": "app"},
        {"word": "nil", "definition": None},
    ]), encoding="utf-8")
    assert list(read_json_pairs(p)) == [("Apple", "a fruit"), ("app", ""), ("nil", "")]


@pytest.mark.parametrize("payload", ["{not json", '{"word": "apple"}'])
def test_bad_json_raises_load_error(tmp_path, payload):
    p = tmp_path / "bad.json"
    p.write_text(payload, encoding="utf-8")
    with pytest.raises(LoadError):
        list(read_json_pairs(p))


def test_read_pairs_dispatches_on_suffix(tmp_path, csv_file):
    p = tmp_path / "words.JSON"
    p.write_text('[{"word": "kiwi", "definition": "a bird"}]', encoding="utf-8")
    assert list(read_pairs(p)) == [("kiwi", "a bird")]
    assert list(read_pairs(csv_file))[0] == ("apple", "a fruit")


def test_load_dictionary_reports_and_logs(csv_file, log):
    lex = Lexicon()
    report = load_dictionary(lex, csv_file, log)
    assert report.total == 4
    assert report.seconds >= 0
    assert lex.lookup("APPLY").definition == "to request formally"
    with open(log.path, encoding="utf-8") as f:
        text = f.read()
    assert "dictionary loaded: 4 entries" in text


def test_load_dictionary_failure_is_logged(tmp_path, log):
    with pytest.raises(LoadError):
        load_dictionary(Lexicon(), tmp_path / "missing.csv", log)
    with open(log.path, encoding="utf-8") as f:
        assert "ERROR" in f.read()


def test_merge_letter_files(tmp_path, log):
    src = tmp_path / "letters"
    src.mkdir()
    (src / "A.csv").write_text("apple,a fruit\n", encoding="utf-8")
    (src / "B.csv").write_text("  \n", encoding="utf-8")
    (src / "C.csv").write_text("cat,an animal\ncar,a vehicle\n\n", encoding="utf-8")
    out = tmp_path / "dictionary.csv"

    merged = merge_letter_files(src, out, log)

    assert merged == ["A.csv", "C.csv"]
    assert out.read_text(encoding="utf-8") == "apple,a fruit\ncat,an animal\ncar,a vehicle"
    with open(log.path, encoding="utf-8") as f:
        assert "skipping missing file: D.csv" in f.read()
