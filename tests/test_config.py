from pathlib import Path

import pytest

from weekdate.config import Settings, get_config_dir, get_config_path, load_settings


def test_config_dir_override(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WEEKDATE_CONFIG_DIR", str(tmp_path))
    assert get_config_dir() == tmp_path
    assert get_config_path() == tmp_path / "config.toml"


def test_config_dir_xdg(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("WEEKDATE_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_config_dir() == tmp_path / "weekdate"


def test_missing_config_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "config.toml") == Settings()


def test_load_settings(tmp_path: Path) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_text("[weekdate]\ndefault_weekday = 0\nlog_level = 'debug'\n")
    settings = load_settings(cfg)
    assert settings.default_weekday == 7  # 0 means Sunday
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "body",
    [
        "[weekdate]\ndefault_weekday = 9\n",
        "[weekdate]\ndefault_weekday = 'monday'\n",
        "[weekdate]\nlog_level = 'LOUD'\n",
        "weekdate = 3\n",
    ],
)
def test_invalid_settings(tmp_path: Path, body: str) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_text(body)
    with pytest.raises(ValueError):
        load_settings(cfg)
