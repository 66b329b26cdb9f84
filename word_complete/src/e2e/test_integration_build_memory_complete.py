from pathlib import Path
import pytest
from wordcomplete.engine import Engine

def _seed(tmp: Path) -> str:
    p = tmp / "words_alpha.txt"
    p.write_text("cat\ncar\ncart\ndog\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_build_and_complete(tmp_path: Path):
    path = _seed(tmp_path)
    eng = Engine()
    try:
        report = eng.build([path])
        assert report.inserted == 4
        hit = eng.complete("ca")
        assert hit.found and hit.word == "car"
        assert eng.suggest("ca").words == ["car", "cart", "cat"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_query_before_build_raises():
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.complete("a")
    with pytest.raises(RuntimeError):
        eng.suggest("a")

@pytest.mark.e2e
def test_inline_words_and_file_together(tmp_path: Path):
    eng = Engine()
    try:
        eng.build([_seed(tmp_path)], words=["Camel", "dove"])
        assert eng.suggest("ca", top_k=10).words == ["camel", "car", "cart", "cat"]
        assert eng.suggest("do").words == ["dog", "dove"]
    finally:
        eng.shutdown()
