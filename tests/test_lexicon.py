# tests/test_lexicon.py
# end-to-end behaviour of the Lexicon facade

import pytest

from lexicon_engine import ConfigError, Lexicon, LookupResult

VOCAB = [
    ("apple", "a fruit"), ("apply", "to request"), ("app", "a program"),
    ("ape", "a primate"), ("maple", "a tree"), ("ample", "enough"),
    ("angle", ""), ("bangle", "a bracelet"), ("tangle", "a knot"),
    ("cat", "an animal"), ("bat", ""), ("act", "a deed"), ("tack", "a nail"),
]


def test_lookup_is_case_insensitive(lexicon):
    assert lexicon.lookup("APPLE") == LookupResult(found=True, definition="a fruit")


def test_suggest_prefix_scenario(lexicon):
    assert lexicon.suggest_prefix("app", 10) == ["app", "apple", "apply"]


def test_correct_scenario(lexicon):
    out = lexicon.correct("aple", 2, 5)
    assert out[0] == "apple"
    assert out == ["apple", "app", "apply"]


def test_repeat_insert_without_definition():
    lex = Lexicon()
    lex.insert("cat", "")
    lex.insert("cat", "")
    assert lex.lookup("cat") == LookupResult(True, "")
    assert lex.words() == ["cat"]
    assert len(lex) == 1


def test_non_empty_definition_overwrites(lexicon):
    lexicon.insert("Apple", "a pome")
    assert lexicon.lookup("apple").definition == "a pome"
    lexicon.insert("APPLE", "")
    assert lexicon.lookup("apple").definition == "a pome"
    assert lexicon.words() == ["apple", "apply", "app"]


def test_words_are_normalized_in_first_insert_order():
    lex = Lexicon()
    lex.insert("Zebra")
    lex.insert("alpha")
    lex.insert("ZEBRA", "striped")
    assert lex.words() == ["zebra", "alpha"]
    assert "Zebra" in lex
    assert "zeb" not in lex


def test_absent_words(lexicon):
    assert lexicon.lookup("banana") == LookupResult(False, "")
    assert lexicon.lookup("ap") == LookupResult(False, "")
    assert lexicon.lookup("apples") == LookupResult(False, "")


def test_empty_string_boundary():
    lex = Lexicon()
    lex.insert("word", "w")
    assert lex.lookup("").found is False
    lex.insert("", "root")
    assert lex.lookup("") == LookupResult(True, "root")
    assert lex.words() == ["word", ""]


def test_load_counts_every_pair():
    lex = Lexicon()
    assert lex.load([("a", "1"), ("A", "2"), ("b", "")]) == 3
    assert lex.words() == ["a", "b"]
    assert lex.lookup("a").definition == "2"


def test_from_pairs_and_words_copy():
    lex = Lexicon.from_pairs(VOCAB)
    ws = lex.words()
    ws.append("junk")
    assert "junk" not in lex
    assert len(lex) == len(VOCAB)


def test_suggestions_are_valid_words():
    lex = Lexicon.from_pairs(VOCAB)
    for prefix in ["a", "ap", "t", "b", "", "x"]:
        out = lex.suggest_prefix(prefix, 4)
        assert len(out) <= 4
        assert len(out) == len(set(out))
        for w in out:
            assert w.startswith(prefix)
            assert lex.lookup(w).found


def test_corrections_obey_distance_and_order():
    lex = Lexicon.from_pairs(VOCAB)
    for query in ["angel", "Cta", "aple", "tangle"]:
        out = lex.correct(query, 2, 10)
        q = query.lower()
        assert q not in out
        assert len(out) == len(set(out))
        keys = [(lex.edit_distance(q, w), w) for w in out]
        assert all(0 < d <= 2 for d, _ in keys)
        assert keys == sorted(keys)


@pytest.mark.parametrize("query", ["aple", "angel", "cta", "bangle", "zzz", ""])
@pytest.mark.parametrize("max_distance,max_suggestions", [(1, 5), (2, 3), (3, 10), (0, 5)])
def test_bktree_index_matches_scan(query, max_distance, max_suggestions):
    scan = Lexicon.from_pairs(VOCAB)
    indexed = Lexicon.from_pairs(VOCAB, fuzzy_index="bktree")
    assert indexed.correct(query, max_distance, max_suggestions) == scan.correct(
        query, max_distance, max_suggestions
    )


def test_unknown_fuzzy_index():
    with pytest.raises(ConfigError):
        Lexicon(fuzzy_index="trigram")


def test_edit_distance_passthrough():
    assert Lexicon.edit_distance("", "abc") == 3
    assert Lexicon.edit_distance("abc", "abc") == 0
