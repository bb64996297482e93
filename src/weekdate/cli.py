import logging
from datetime import date
from typing import Annotated

from cyclopts import App, Parameter

from .config import get_config_dir, get_config_path, load_settings
from .errors import WeekDateError, WeekRangeError
from .isoyear import validate, weeks_in_year as count_weeks
from .week import WeekDate
from .weeks import parse_week_str, resolve_week_range

app = App(help="Inspect and compute ISO 8601 week dates (YYYY-Www).")

logger = logging.getLogger("weekdate")

_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _parse(value: str) -> WeekDate:
    try:
        return parse_week_str(value)
    except WeekDateError as e:
        raise SystemExit(f"Invalid week '{value}': {e}") from e


@app.command(help="Show the days of a week and how many weeks its year has.")
def info(week: str) -> None:
    wd = _parse(week)
    print(f"{wd}  (year {wd.year}, week {wd.week} of {count_weeks(wd.year)})")
    for weekday, name in enumerate(_WEEKDAY_NAMES, start=1):
        try:
            day = wd.to_date(weekday).isoformat()
        except WeekRangeError:
            # Year 0 and the tail of 9999 are outside datetime.date.
            day = "(outside the supported calendar)"
        print(f"  {name:<9} {day}")


@app.command(help="Add a (possibly negative) number of weeks to a week.")
def add(week: str, weeks: int) -> None:
    try:
        result = _parse(week).add(weeks)
    except WeekDateError as e:
        raise SystemExit(str(e)) from e
    print(result)


@app.command(help="Print the signed number of weeks from START to END.")
def diff(start: str, end: str) -> None:
    print(_parse(start).difference(_parse(end)))


@app.command(name="from-date", help="Print the ISO week containing a YYYY-MM-DD date.")
def from_date(value: str) -> None:
    try:
        day = date.fromisoformat(value)
    except ValueError as e:
        raise SystemExit(f"Invalid date '{value}': {e}") from e
    print(WeekDate.from_date(day))


@app.command(name="to-date", help="Print the date of a weekday (1=Monday .. 7=Sunday) in a week.")
def to_date(week: str, weekday: int | None = None) -> None:
    if weekday is None:
        weekday = load_settings().default_weekday
    try:
        day = _parse(week).to_date(weekday)
    except (WeekDateError, ValueError, TypeError) as e:
        raise SystemExit(str(e)) from e
    print(day.isoformat())


@app.command(name="weeks-in-year", help="Print the number of ISO weeks (52 or 53) in a year.")
def weeks_in_year(year: int) -> None:
    try:
        validate(year, 1)
    except WeekDateError as e:
        raise SystemExit(str(e)) from e
    print(count_weeks(year))


@app.command(
    name="range",
    help=(
        "List the weeks from START to END inclusive. Without --end the range stops "
        "at the latest fully completed week."
    ),
)
def week_range(start: str, end: str | None = None) -> None:
    try:
        rng = resolve_week_range(start, end_week=end)
    except (WeekDateError, ValueError) as e:
        raise SystemExit(str(e)) from e
    logger.debug("Resolved %s..%s (%d weeks)", rng.start, rng.end, len(rng))
    for code in rng.codes:
        print(code)


@app.command(name="config-dir", help="Print the path to the configuration directory.")
def config_dir() -> None:  # noqa: D401
    print(get_config_dir())


def _configure_logging(verbose: bool) -> None:
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"Invalid config {get_config_path()}: {e}") from e
    logging.basicConfig(format="%(levelname)-8s | %(message)s")
    logger.setLevel(logging.DEBUG if verbose else settings.log_level)
    logger.debug("Loaded settings from %s: %s", get_config_path(), settings)


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    verbose: Annotated[bool, Parameter(name=["--verbose", "-v"])] = False,
) -> None:
    """Configure logging from the config file (or --verbose), then run a command."""
    _configure_logging(verbose)
    app(tokens)


def main() -> None:
    app.meta()
