import pytest

from wordcomplete.errors import InvalidSymbolError
from wordcomplete.trie import PrefixIndex


@pytest.mark.parametrize("bad, symbol, pos", [
    ("Cat", "C", 0),
    ("don't", "'", 3),
    ("ab1", "1", 2),
    ("naïve", "ï", 2),
])
def test_invalid_symbol_reports_where(bad, symbol, pos):
    idx = PrefixIndex()
    with pytest.raises(InvalidSymbolError) as ei:
        idx.insert(bad)
    assert ei.value.symbol == symbol
    assert ei.value.position == pos
    assert ei.value.word == bad


def test_rejected_word_leaves_no_partial_path():
    idx = PrefixIndex()
    idx.insert("dog")
    with pytest.raises(InvalidSymbolError):
        idx.insert("carpet!")
    # "car..." must not exist even as a prefix path
    assert idx.all_with_prefix("c") == []
    assert idx.all_with_prefix("") == ["dog"]
    assert len(idx) == 1


def test_index_still_usable_after_rejection():
    idx = PrefixIndex()
    with pytest.raises(InvalidSymbolError):
        idx.insert("x y")
    idx.insert("xy")
    assert idx.all_with_prefix("x") == ["xy"]


def test_invalid_symbol_is_a_value_error():
    with pytest.raises(ValueError):
        PrefixIndex().insert("A")


def test_empty_word_rejected():
    with pytest.raises(ValueError):
        PrefixIndex().insert("")


def test_custom_alphabet_orders_by_alphabet_position():
    idx = PrefixIndex(alphabet="cba")
    for w in ("a", "b", "c", "ab"):
        idx.insert(w)
    assert idx.all_with_prefix("") == ["c", "b", "a", "ab"]
    with pytest.raises(InvalidSymbolError):
        idx.insert("d")
