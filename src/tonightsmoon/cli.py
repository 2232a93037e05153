"""CLI entry point for tonight's lunar phase report.

    uv run tonightsmoon
    uv run tonightsmoon --date 2024-01-31 --lang ko --json
"""

import dataclasses
import json
import logging
from datetime import datetime

import click
from dotenv import load_dotenv

from tonightsmoon.compute import InvalidDateError, build_report
from tonightsmoon.config import ConfigError, load_settings
from tonightsmoon.flavor import MissingAssetError
from tonightsmoon.i18n import LANGUAGES, t
from tonightsmoon.models import CalendarDateTime, LunarPhaseReport

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> CalendarDateTime:
    try:
        parts = [int(p) for p in value.split("-")]
    except ValueError as e:
        raise InvalidDateError(f"expected YYYY-MM-DD, got {value!r}") from e
    if len(parts) != 3:
        raise InvalidDateError(f"expected YYYY-MM-DD, got {value!r}")
    year, month, day = parts
    return CalendarDateTime(year=year, month=month, day=day)


def _to_json(report: LunarPhaseReport) -> str:
    payload = dataclasses.asdict(report)
    payload["phase"] = report.phase.name
    payload["night_of"] = report.night_of.isoformat()
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _to_text(report: LunarPhaseReport, lang: str) -> str:
    lines = []
    if report.exclamation:
        lines.append(report.exclamation)
    lines.append(f"{t('label_tonight', lang)}: {report.phase_name}")
    lines.append(f"{t('label_night_of', lang)}: {report.night_of.isoformat()}")
    lines.append(f"{t('label_icon', lang)}: {report.icon_name}")
    lines.append(f"{t('label_julian_date', lang)}: {report.julian_date:.5f}")
    if report.quote:
        lines.append("")
        lines.append(report.quote)
    return "\n".join(lines)


@click.command()
@click.option(
    "--date",
    "on_date",
    metavar="YYYY-MM-DD",
    help="Report the night after this date instead of tonight.",
)
@click.option("--lang", type=click.Choice(LANGUAGES), help="Display language.")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
def cli(on_date: str | None, lang: str | None, as_json: bool) -> None:
    """Show tonight's lunar phase with an exclamation and a quote."""
    load_dotenv()
    try:
        settings = load_settings()
        if lang:
            settings = dataclasses.replace(settings, lang=lang)
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s - %(levelname)s - %(message)s",
        )

        clock = None
        if on_date:
            when = _parse_date(on_date)
            try:
                pinned = datetime(when.year, when.month, when.day)
            except ValueError as e:
                raise InvalidDateError(f"year out of range: {when.year}") from e
            clock = lambda: pinned  # noqa: E731

        report = build_report(clock=clock, settings=settings)
    except (InvalidDateError, MissingAssetError, ConfigError) as e:
        logger.debug("Report failed", exc_info=True)
        raise click.ClickException(str(e)) from e

    click.echo(_to_json(report) if as_json else _to_text(report, settings.lang))


if __name__ == "__main__":
    cli()
