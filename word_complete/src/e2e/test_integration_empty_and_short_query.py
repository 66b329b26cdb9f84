from pathlib import Path
import pytest
from wordcomplete import config as CFG
from wordcomplete.engine import Engine

def _seed(tmp: Path) -> str:
    p = tmp / "short.txt"
    p.write_text("a an and ant\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_empty_and_single_char_query(tmp_path: Path):
    eng = Engine()
    try:
        eng.build([_seed(tmp_path)])
        assert eng.suggest("").words == ["a", "an", "and", "ant"]
        assert eng.complete("").word == "a"
        assert eng.suggest("a").words == ["a", "an", "and", "ant"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_empty_dictionary(tmp_path: Path):
    empty = tmp_path / "empty.txt"; empty.write_text("", encoding="utf-8")
    eng = Engine()
    try:
        eng.build([str(empty)])
        assert eng.suggest("").words == []
        miss = eng.complete("anything")
        assert miss.found is False and miss.word == "anything"
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_no_dictionary_anywhere(monkeypatch):
    monkeypatch.setattr(CFG, "DICTIONARY_SEARCH_PATHS", [])
    with pytest.raises(ValueError):
        Engine().build()
