from pathlib import Path

import pytest

from static_health.core import config
from static_health.core.config import DEFAULT_PORT, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("PORT", "STATIC_HEALTH_PORT", "STATIC_HEALTH_STATIC_ROOT", "STATIC_HEALTH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_port_defaults_to_3000() -> None:
    assert Settings().port == DEFAULT_PORT == 3000


def test_port_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "4000")
    assert Settings().port == 4000


def test_prefixed_port_is_accepted(monkeypatch) -> None:
    monkeypatch.setenv("STATIC_HEALTH_PORT", "5000")
    assert Settings().port == 5000


def test_plain_port_wins_over_prefixed(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "4000")
    monkeypatch.setenv("STATIC_HEALTH_PORT", "5000")
    assert Settings().port == 4000


@pytest.mark.parametrize("raw", ["", "abc", "80.5", "0", "-1", "70000"])
def test_invalid_port_falls_back_to_default(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("PORT", raw)
    assert Settings().port == DEFAULT_PORT


def test_static_root_defaults_to_app_dir(tmp_path: Path) -> None:
    assert Settings().static_root == (tmp_path / "app").resolve()


def test_static_root_is_made_absolute(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STATIC_HEALTH_STATIC_ROOT", "public")
    assert Settings().static_root == (tmp_path / "public").resolve()


def test_log_level_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("STATIC_HEALTH_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_dotenv_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("PORT=4100\nSTATIC_HEALTH_SERVE_DOTFILES=true\n", encoding="utf-8")
    loaded = Settings()
    assert loaded.port == 4100
    assert loaded.serve_dotfiles is True


def test_reload_settings_picks_up_changes(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "4200")
    try:
        assert config.reload_settings().port == 4200
    finally:
        monkeypatch.delenv("PORT")
        config.reload_settings()
