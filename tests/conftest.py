from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """Returns function writing config text into a file in tmp_path"""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return path
    return _write


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('INTSET_INTSET__MAX_SIZE', raising=False)
