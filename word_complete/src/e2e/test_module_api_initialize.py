from pathlib import Path
import pytest
import wordcomplete_frontend as api

@pytest.mark.e2e
def test_initialize_then_complete_and_suggest(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(api, "_engine", None)
    with pytest.raises(RuntimeError):
        api.complete("a")

    p = tmp_path / "w.txt"; p.write_text("apple apply apt\n", encoding="utf-8")
    eng = api.initialize([str(p)])
    try:
        assert api.complete("ap").word == "apple"
        assert api.suggest("appl", k=1).words == ["apple"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_initialize_inline_words_only(monkeypatch):
    monkeypatch.setattr(api, "_engine", None)
    eng = api.initialize(words=["Zed", "zoo"])
    assert api.suggest("z").words == ["zed", "zoo"]
    eng.shutdown()
