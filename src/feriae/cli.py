"""Typer CLI for feriae."""

from __future__ import annotations

import datetime
import json
import logging
import sys

import typer

from feriae.collection import HolidayCollection
from feriae.config import load_settings
from feriae.exceptions import FeriaeError
from feriae.factory import create, create_by_region_code, list_providers, next_working_day

app = typer.Typer(
    name="feriae",
    help="Public holidays per country and year, with localized names.",
    add_completion=False,
)


def _parse_date(value: str) -> datetime.date:
    """Parse a YYYY-MM-DD date string."""
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid date format {value!r}. Use YYYY-MM-DD.") from None


def _current_year() -> int:
    return datetime.date.today().year


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


def _build(country: str, year: int, locale: str | None) -> HolidayCollection:
    """Create a collection from a provider name or a region code."""
    locale = locale or load_settings().locale
    if country in list_providers():
        return create_by_region_code(country, year, locale)
    return create(country, year, locale)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def holidays(
    country: str = typer.Option(
        "US",
        "--country",
        "-c",
        help="Provider name (e.g. Japan) or region code (e.g. JP, AU-WA).",
    ),
    year: int = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to list holidays for. Defaults to the current year.",
    ),
    locale: str | None = typer.Option(
        None,
        "--locale",
        "-l",
        help="Locale for holiday names. Defaults to $FERIAE_LOCALE or en_US.",
    ),
    output_json: bool = typer.Option(
        False,
        "--json",
        help="Output holidays as JSON.",
    ),
) -> None:
    """List the holidays of a country for a year."""
    resolved_year = year if year is not None else _current_year()

    try:
        collection = _build(country, resolved_year, locale)
        entries = sorted(collection)
        if output_json:
            output = {
                "provider": collection.provider.name,
                "year": collection.year,
                "locale": collection.locale,
                "holidays": [h.to_dict() for h in entries],
            }
            json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
            typer.echo()
            return
        lines = [
            f"    {h.date.strftime('%a, %b %d'):>12}  {h.get_name():<40} {h.type.value}"
            for h in entries
        ]
    except FeriaeError as exc:
        raise _fail(exc) from None

    typer.echo(f"  {collection.provider.name} — {resolved_year}")
    typer.echo()
    for line in lines:
        typer.echo(line)


@app.command()
def providers() -> None:
    """List the available holiday providers."""
    for code, name in list_providers().items():
        typer.echo(f"  {code:<6} {name}")


@app.command()
def when(
    key: str = typer.Argument(..., help="Holiday key, e.g. newYearsDay."),
    country: str = typer.Option("US", "--country", "-c", help="Provider name or region code."),
    year: int = typer.Option(None, "--year", "-y", help="Defaults to the current year."),
) -> None:
    """Print the date of a holiday."""
    resolved_year = year if year is not None else _current_year()
    try:
        collection = _build(country, resolved_year, None)
        typer.echo(collection.when_is(key))
    except FeriaeError as exc:
        raise _fail(exc) from None


@app.command()
def workday(
    date: str = typer.Argument(..., help="Date to check (YYYY-MM-DD)."),
    country: str = typer.Option("US", "--country", "-c", help="Provider name or region code."),
) -> None:
    """Tell whether a date is a working day, and which working day comes next."""
    day = _parse_date(date)
    try:
        collection = _build(country, day.year, None)
        provider = collection.provider
        names = ", ".join(h.get_name() for h in collection.on(day))
        following = next_working_day(provider, day)
    except FeriaeError as exc:
        raise _fail(exc) from None

    if collection.is_working_day(day):
        typer.echo(f"{day.isoformat()} is a working day in {provider.name}.")
    elif names:
        typer.echo(f"{day.isoformat()} is not a working day in {provider.name}: {names}.")
    else:
        typer.echo(f"{day.isoformat()} is not a working day in {provider.name}: weekend.")
    typer.echo(f"Next working day: {following.isoformat()}")


def main() -> None:
    """Entry point for the CLI."""
    app()
