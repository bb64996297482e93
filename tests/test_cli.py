import contextlib
import logging
from pathlib import Path

import pytest

from weekdate import cli


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path) -> Path:
    monkeypatch.setenv("WEEKDATE_CONFIG_DIR", str(tmp_path))
    return tmp_path


def test_add(capsys) -> None:
    cli.add("2015-W53", 1)
    cli.add("2016W01", -1)
    assert capsys.readouterr().out.splitlines() == ["2016-W01", "2015-W53"]


def test_add_out_of_range() -> None:
    with pytest.raises(SystemExit, match="overflows"):
        cli.add("9999-W52", 1)


def test_invalid_week_argument() -> None:
    with pytest.raises(SystemExit, match="Invalid week 'bogus'"):
        cli.diff("bogus", "2015-W01")


def test_diff(capsys) -> None:
    cli.diff("2015-W01", "2016-W01")
    assert capsys.readouterr().out.strip() == "53"


def test_from_date(capsys) -> None:
    cli.from_date("2021-01-03")
    assert capsys.readouterr().out.strip() == "2020-W53"
    with pytest.raises(SystemExit, match="Invalid date"):
        cli.from_date("2021-13-01")


def test_to_date(capsys) -> None:
    cli.to_date("2020-W53", weekday=7)
    assert capsys.readouterr().out.strip() == "2021-01-03"


def test_to_date_uses_configured_weekday(capsys, isolated_config: Path) -> None:
    cli.to_date("2020-W53")
    assert capsys.readouterr().out.strip() == "2020-12-28"
    (isolated_config / "config.toml").write_text("[weekdate]\ndefault_weekday = 5\n")
    cli.to_date("2020-W53")
    assert capsys.readouterr().out.strip() == "2021-01-01"


def test_weeks_in_year(capsys) -> None:
    cli.weeks_in_year(2015)
    cli.weeks_in_year(2021)
    assert capsys.readouterr().out.split() == ["53", "52"]
    with pytest.raises(SystemExit):
        cli.weeks_in_year(10000)


def test_info(capsys) -> None:
    cli.info("2020-W53")
    out = capsys.readouterr().out
    assert "week 53 of 53" in out
    assert "Monday    2020-12-28" in out
    assert "Sunday    2021-01-03" in out


def test_range(capsys) -> None:
    cli.week_range("2020W52", end="2021W01")
    assert capsys.readouterr().out.split() == ["2020-W52", "2020-W53", "2021-W01"]


def test_config_dir(capsys, isolated_config: Path) -> None:
    cli.config_dir()
    assert capsys.readouterr().out.strip() == str(isolated_config)


def test_info_year_zero(capsys) -> None:
    cli.info("0000-W01")
    out = capsys.readouterr().out
    assert "week 1 of 52" in out
    assert out.count("(outside the supported calendar)") == 7


def test_info_last_supported_week(capsys) -> None:
    cli.info("9999-W52")
    out = capsys.readouterr().out
    assert "Monday    9999-12-27" in out
    assert "Friday    9999-12-31" in out
    assert "Saturday  (outside the supported calendar)" in out
    assert "Sunday    (outside the supported calendar)" in out


def test_range_last_supported_weeks(capsys) -> None:
    cli.week_range("9999W51", end="9999W52")
    assert capsys.readouterr().out.split() == ["9999-W51", "9999-W52"]


@pytest.fixture
def restore_log_level():
    level = logging.getLogger("weekdate").level
    yield
    logging.getLogger("weekdate").setLevel(level)


def test_launcher_verbose_sets_debug(capsys, isolated_config: Path, restore_log_level) -> None:
    # Depending on the cyclopts version, running a command may end with sys.exit(0).
    with contextlib.suppress(SystemExit):
        cli.launcher("config-dir", verbose=True)
    assert logging.getLogger("weekdate").level == logging.DEBUG
    assert capsys.readouterr().out.strip() == str(isolated_config)


def test_launcher_uses_configured_log_level(isolated_config: Path, restore_log_level) -> None:
    (isolated_config / "config.toml").write_text("[weekdate]\nlog_level = 'info'\n")
    with contextlib.suppress(SystemExit):
        cli.launcher("config-dir")
    assert logging.getLogger("weekdate").level == logging.INFO


def test_launcher_rejects_invalid_config(isolated_config: Path) -> None:
    (isolated_config / "config.toml").write_text("[weekdate]\nlog_level = 'LOUD'\n")
    with pytest.raises(SystemExit, match="Invalid config"):
        cli.launcher("config-dir")
