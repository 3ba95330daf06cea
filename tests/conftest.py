"""Shared fixtures: a throwaway asset root and a clean settings environment."""

import pytest

SETTINGS_ENV = ("HOST", "PORT", "ASSET_ROOT", "FALLBACK_FILE", "LOG_LEVEL", "TIMEOUT_KEEP_ALIVE")

INDEX_HTML = b"<html>App</html>"
APP_JS = b"console.log(1)"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep host environment variables and stray .env files out of the tests."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def dist(tmp_path):
    """
    tmp_path/
      secret.txt          outside the asset root
      dist/
        index.html
        app.js
        styles/site.css
        docs/index.html
        images/logo.svg   directory without an index
    """
    (tmp_path / "secret.txt").write_text("top secret")
    root = tmp_path / "dist"
    root.mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "app.js").write_bytes(APP_JS)
    (root / "styles").mkdir()
    (root / "styles" / "site.css").write_text("body { margin: 0; }")
    (root / "docs").mkdir()
    (root / "docs" / "index.html").write_text("<html>Docs</html>")
    (root / "images").mkdir()
    (root / "images" / "logo.svg").write_text("<svg></svg>")
    return root
