from pathlib import Path
import pytest
from wordcomplete.engine import Engine

def _seed(tmp: Path) -> str:
    p = tmp / "t.txt"
    p.write_text("tab table tablet taboo tack tact tad tag tail\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_topk_limit_and_result_types(tmp_path: Path):
    eng = Engine()
    try:
        eng.build([_seed(tmp_path)])
        default = eng.suggest("ta")
        assert default.words == ["tab", "table", "tablet", "taboo", "tack"]  # TOP_K = 5

        two = eng.suggest("ta", top_k=2)
        assert two.words == ["tab", "table"]

        many = eng.suggest("ta", top_k=100)
        assert len(many.words) == 9
        assert all(isinstance(w, str) and w for w in many.words)
        assert many.words == sorted(many.words)
    finally:
        eng.shutdown()
