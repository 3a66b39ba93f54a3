from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from static_health.app import create_app
from static_health.core.config import Settings


@pytest.fixture()
def static_root(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    (root / "css").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "empty").mkdir()
    (root / "index.html").write_text("<h1>home</h1>", encoding="utf-8")
    (root / "css" / "site.css").write_text("body { margin: 0; }", encoding="utf-8")
    (root / "docs" / "index.html").write_text("<h1>docs</h1>", encoding="utf-8")
    (root / "logo.bin").write_bytes(bytes(range(256)))
    (root / ".env").write_text("SECRET=1", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")
    return root


@pytest.fixture()
def app_settings(static_root: Path) -> Settings:
    return Settings(static_root=static_root, port=4000)


@pytest.fixture()
def client(app_settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client
