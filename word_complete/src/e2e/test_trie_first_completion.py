import pytest

from wordcomplete.trie import PrefixIndex


@pytest.fixture
def idx() -> PrefixIndex:
    t = PrefixIndex()
    for w in ("cat", "car", "cart", "dog", "dogma", "zebra"):
        t.insert(w)
    return t


def test_first_completion_is_first_of_enumeration(idx):
    for p in ("", "c", "ca", "car", "d", "dog", "z"):
        assert idx.first_completion(p) == idx.all_with_prefix(p)[0]


def test_first_completion_examples(idx):
    assert idx.first_completion("ca") == "car"
    assert idx.first_completion("dogm") == "dogma"


def test_miss_echoes_prefix(idx):
    assert idx.first_completion("x") == "x"
    assert idx.first_completion("cab") == "cab"


def test_empty_dictionary_echoes_anything():
    assert PrefixIndex().first_completion("anything") == "anything"
    assert PrefixIndex().first_completion("") == ""


def test_find_completion_flags_match(idx):
    hit = idx.find_completion("ze")
    assert hit.found is True
    assert hit.word == "zebra"
    assert hit.prefix == "ze"


def test_find_completion_flags_miss(idx):
    miss = idx.find_completion("zz")
    assert miss.found is False
    assert miss.word == "zz"


def test_exact_word_is_found_and_distinguishable_from_miss(idx):
    # "cat" completes to itself, but it is a real match unlike an echo
    hit = idx.find_completion("cat")
    assert hit.found is True and hit.word == "cat"
    assert idx.find_completion("cats").found is False


def test_find_completion_on_empty_index():
    miss = PrefixIndex().find_completion("")
    assert miss.found is False
    assert miss.word == ""
