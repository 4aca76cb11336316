"""Entry points building holiday collections from the provider registry."""

from __future__ import annotations

import datetime
import logging

from feriae.collection import HolidayCollection, Provider
from feriae.exceptions import InvalidArgument, ProviderNotFound
from feriae.holiday import to_date
from feriae.locales import DEFAULT_LOCALE
from feriae.providers import BY_NAME, REGISTRY
from feriae.translations import TranslationSource, bundled_translations

logger = logging.getLogger(__name__)


def _resolve(country: str | Provider) -> Provider:
    if isinstance(country, Provider):
        return country
    provider = BY_NAME.get(country)
    if provider is None:
        supported = ", ".join(sorted(BY_NAME))
        msg = f"Unknown holiday provider {country!r}. Supported: {supported}"
        raise ProviderNotFound(msg)
    return provider


def create(
    country: str | Provider,
    year: int,
    locale: str = DEFAULT_LOCALE,
    translations: TranslationSource | None = None,
) -> HolidayCollection:
    """Return the holidays of *country* for *year*.

    *country* is a provider name such as ``"Japan"`` or
    ``"Australia/WesternAustralia"``, or a :class:`Provider` defined by the
    caller.  Names are merged from *translations*, or from the bundled
    translations when none is given.
    """
    provider = _resolve(country)
    if translations is None:
        translations = bundled_translations()
    logger.debug("Creating %s holidays for %s in %s", provider.name, year, locale)
    return HolidayCollection(provider, year, locale, translations)


def create_by_region_code(
    code: str,
    year: int,
    locale: str = DEFAULT_LOCALE,
    translations: TranslationSource | None = None,
) -> HolidayCollection:
    """Like :func:`create`, with an ISO 3166-1 or ISO 3166-2 code (``"JP"``, ``"AU-WA"``)."""
    provider = REGISTRY.get(code)
    if provider is None:
        raise ProviderNotFound(f"No holiday provider for region code {code!r}")
    return create(provider, year, locale, translations)


def list_providers() -> dict[str, str]:
    """Map of region code to provider name for every built-in provider."""
    return {code: provider.name for code, provider in sorted(REGISTRY.items())}


# ---------------------------------------------------------------------------
# Working days
# ---------------------------------------------------------------------------


def _walk(
    country: str | Provider, start: datetime.date, working_days: int, step: int
) -> datetime.date:
    if working_days < 0:
        raise InvalidArgument(f"working_days must not be negative, got {working_days}")
    provider = _resolve(country)
    date = to_date(start)
    by_year: dict[int, HolidayCollection] = {}
    remaining = working_days
    while remaining > 0:
        date += datetime.timedelta(days=step)
        holidays = by_year.get(date.year)
        if holidays is None:
            holidays = HolidayCollection(provider, date.year)
            by_year[date.year] = holidays
        if holidays.is_working_day(date):
            remaining -= 1
    return date


def next_working_day(
    country: str | Provider, start: datetime.date, working_days: int = 1
) -> datetime.date:
    """The date *working_days* working days after *start* (exclusive)."""
    return _walk(country, start, working_days, 1)


def previous_working_day(
    country: str | Provider, start: datetime.date, working_days: int = 1
) -> datetime.date:
    """The date *working_days* working days before *start* (exclusive)."""
    return _walk(country, start, working_days, -1)
