from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[3] / "pyproject.toml"


def test_project_metadata_has_no_internal_readme():
    meta = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
    assert "readme" not in meta
    deps = " ".join(meta["dependencies"])
    assert "flask" in deps and "customtkinter" in deps
