# tests/test_trie.py
from lexicon_engine.core.trie import NOT_FOUND, LookupResult, Trie, normalize


def test_insert_and_lookup():
    t = Trie()
    t.insert("apple", "a fruit")
    assert t.lookup("apple") == LookupResult(True, "a fruit")
    assert t.lookup("APPLE") == LookupResult(True, "a fruit")


def test_prefix_path_is_not_a_word():
    t = Trie()
    t.insert("apple", "a fruit")
    res = t.lookup("app")
    assert res.found is False
    assert res.definition == ""


def test_missing_edge_returns_not_found():
    t = Trie()
    t.insert("apple")
    assert t.lookup("apricot") is NOT_FOUND
    assert t.lookup("b") == LookupResult(False, "")


def test_size_counts_terminals_once():
    t = Trie()
    t.insert("app")
    t.insert("apple")
    t.insert("app", "again")
    assert t.size() == 2
    assert t.lookup("app").definition == "again"


def test_find_node():
    t = Trie()
    t.insert("cat")
    assert t.find_node("ca") is not None
    assert t.find_node("ca").is_word is False
    assert t.find_node("cx") is None
    assert t.find_node("") is t.root


def test_empty_word_marks_root():
    t = Trie()
    t.insert("apple")
    assert t.lookup("").found is False
    t.insert("")
    assert t.lookup("").found is True
    assert t.root.is_word


def test_contains_and_normalize():
    t = Trie()
    t.insert(normalize("Straße"))
    assert "STRASSE" not in t  # lower() keeps ß
    assert "straße" in t
    assert "stra" not in t
