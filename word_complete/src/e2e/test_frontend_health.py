from pathlib import Path
import pytest
from wordcomplete.engine import Engine
from wordcomplete_frontend.web import app as flask_app

def _seed(tmp: Path) -> str:
    p = tmp / "y.txt"
    p.write_text("health check line\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_frontend_health(tmp_path: Path, monkeypatch):
    eng = Engine(); eng.build([_seed(tmp_path)])

    import wordcomplete_frontend.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)

    client = flask_app.test_client()
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "words": 3}

    eng.shutdown()
    r = client.get("/health")
    assert r.status_code == 503
    assert r.get_json()["ok"] is False
