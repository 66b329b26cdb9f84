from pathlib import Path
import pytest
from wordcomplete import config as CFG
from wordcomplete.engine import Engine

def _seed(tmp: Path) -> str:
    p = tmp / "mix.txt"
    p.write_text("Café naïve Über résumé\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_unicode_and_accents(tmp_path: Path):
    eng = Engine()
    try:
        report = eng.build([_seed(tmp_path)])
        assert report.skipped == 0
        assert eng.complete("caf").word == "cafe", "accent folding on load failed"
        assert eng.complete("NAÏ").word == "naive", "query normalization failed"
        assert eng.suggest("u").words == ["uber"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_accents_rejected_when_folding_disabled(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(CFG, "FOLD_ACCENTS", False)
    eng = Engine()
    try:
        report = eng.build([_seed(tmp_path)])
        assert report.skipped == 4
        assert eng.suggest("").words == []
    finally:
        eng.shutdown()
