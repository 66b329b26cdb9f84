from pathlib import Path
import pytest
from wordcomplete.engine import Engine
from wordcomplete_frontend.web import app as flask_app

def _seed(tmp: Path) -> str:
    p = tmp / "x.txt"
    p.write_text("hello world\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_frontend_home_page_renders(tmp_path: Path, monkeypatch):
    eng = Engine(); eng.build([_seed(tmp_path)])

    import wordcomplete_frontend.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)

    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "word complete" in html
    assert "/api/suggest" in html and "/api/complete" in html

    eng.shutdown()
