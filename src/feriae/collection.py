"""Per-year holiday collections.

A :class:`HolidayCollection` is built for one provider (the rule-set of a
country or region), one year and one locale.  Construction runs the
provider's rules, which add :class:`~feriae.holiday.Holiday` entries to
the collection.  Afterwards the collection can be queried, navigated to
neighbouring years and changed by the caller.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from feriae.config import YEAR_LOWER_BOUND, YEAR_UPPER_BOUND
from feriae.exceptions import HolidayNotFound, InputTypeMismatch, InvalidArgument, InvalidYear
from feriae.holiday import Holiday, HolidayType, SubstituteHoliday, to_date
from feriae.locales import DEFAULT_LOCALE, validate_locale
from feriae.translations import TranslationSource

logger = logging.getLogger(__name__)

# Python weekday numbers: 0 = Monday … 6 = Sunday.
SATURDAY = 5
SUNDAY = 6
WEEKEND: frozenset[int] = frozenset({SATURDAY, SUNDAY})

Rules = Callable[["HolidayCollection"], None]
"""Signature: rules(collection) -> None, adding the holidays of ``collection.year``."""


@dataclass(frozen=True)
class Provider:
    """The holiday rules of one country or region.

    *code* is the ISO 3166-1 (``"JP"``) or ISO 3166-2 (``"AU-WA"``) code,
    *name* the identifier accepted by :func:`feriae.factory.create`.
    """

    code: str
    name: str
    rules: Rules = field(compare=False)
    weekend_days: frozenset[int] = WEEKEND


def validate_year(year: object) -> int:
    if (
        not isinstance(year, int)
        or isinstance(year, bool)
        or not YEAR_LOWER_BOUND <= year <= YEAR_UPPER_BOUND
    ):
        raise InvalidYear(
            f"Year {year!r} must be an integer between {YEAR_LOWER_BOUND} and {YEAR_UPPER_BOUND}."
        )
    return year


class HolidayCollection:
    """The holidays of one provider for one year, keyed by holiday key.

    Keys are unique and iteration follows insertion order.  When a
    *translations* source is given, every holiday added is merged with its
    global translations.  Not safe for concurrent mutation.
    """

    def __init__(
        self,
        provider: Provider,
        year: int,
        locale: str = DEFAULT_LOCALE,
        translations: TranslationSource | None = None,
    ):
        self.year = validate_year(year)
        self.locale = validate_locale(locale)
        self.provider = provider
        self.translations = translations
        self.weekend_days = provider.weekend_days
        self._holidays: dict[str, Holiday] = {}

        provider.rules(self)
        logger.debug(
            "Built %d holidays for %s (%d, %s)",
            len(self._holidays),
            provider.name,
            year,
            locale,
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, holiday: Holiday) -> None:
        """Add *holiday* unless a holiday with the same key is present."""
        if not isinstance(holiday, Holiday):
            raise InputTypeMismatch(f"Expected a Holiday, got {type(holiday).__name__}")
        if holiday.key in self._holidays:
            logger.debug("Holiday %r already present, not added", holiday.key)
            return
        if self.translations is not None:
            holiday.merge_global_translations(self.translations)
        self._holidays[holiday.key] = holiday

    def remove(self, key: str) -> None:
        """Remove the holiday stored under *key*; unknown keys are ignored."""
        self._holidays.pop(key, None)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str) or not key.strip():
            raise InvalidArgument("Holiday key can not be blank.")

    def get(self, key: str) -> Holiday:
        self._check_key(key)
        try:
            return self._holidays[key]
        except KeyError:
            raise HolidayNotFound(
                f"No holiday {key!r} in {self.provider.name} for {self.year}"
            ) from None

    def all(self) -> dict[str, Holiday]:
        return dict(self._holidays)

    def names(self) -> list[str]:
        return list(self._holidays)

    def holiday_dates(self) -> list[datetime.date]:
        return [h.date for h in self._holidays.values()]

    def count(self) -> int:
        """Number of distinct holidays.

        A substitution day counts as the holiday it replaces, so it does not
        add to the total.
        """
        keys = {
            h.substituted.key if isinstance(h, SubstituteHoliday) else h.key
            for h in self._holidays.values()
        }
        return len(keys)

    def when_is(self, key: str) -> str:
        """ISO date (``YYYY-MM-DD``) of the holiday stored under *key*."""
        return self.get(key).date.isoformat()

    def what_week_day_is(self, key: str) -> int:
        """Day of the week of the holiday under *key*, 0 = Sunday … 6 = Saturday."""
        return self.get(key).weekday

    # ------------------------------------------------------------------
    # Date queries
    # ------------------------------------------------------------------

    def is_holiday(self, date: datetime.date) -> bool:
        """True when any holiday falls on *date*, whatever its type."""
        date = to_date(date)
        return any(h.date == date for h in self._holidays.values())

    def is_weekend_day(self, date: datetime.date) -> bool:
        return to_date(date).weekday() in self.weekend_days

    def is_working_day(self, date: datetime.date) -> bool:
        """True when *date* is neither a holiday nor a weekend day."""
        return not self.is_holiday(date) and not self.is_weekend_day(date)

    def on(self, date: datetime.date) -> list[Holiday]:
        date = to_date(date)
        return [h for h in self._holidays.values() if h.date == date]

    def between(
        self, start: datetime.date, end: datetime.date, equal: bool = True
    ) -> list[Holiday]:
        """Holidays from *start* to *end*, sorted by date.

        The bounds are included when *equal* is true.
        """
        start, end = to_date(start), to_date(end)
        if start > end:
            raise InvalidArgument(f"Start date {start} must not be after end date {end}.")
        if equal:
            found = [h for h in self._holidays.values() if start <= h.date <= end]
        else:
            found = [h for h in self._holidays.values() if start < h.date < end]
        return sorted(found)

    def of_type(self, *types: HolidayType | str) -> list[Holiday]:
        wanted = {HolidayType(t) for t in types}
        return [h for h in self._holidays.values() if h.type in wanted]

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _another_year(self, year: int, key: str) -> Holiday:
        self._check_key(key)
        other = HolidayCollection(self.provider, year, self.locale, self.translations)
        return other.get(key)

    def next(self, key: str) -> Holiday:
        """The holiday under *key* in the following year."""
        return self._another_year(self.year + 1, key)

    def previous(self, key: str) -> Holiday:
        """The holiday under *key* in the preceding year."""
        return self._another_year(self.year - 1, key)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Holiday]:
        return iter(list(self._holidays.values()))

    def __len__(self) -> int:
        return len(self._holidays)

    def __contains__(self, key: object) -> bool:
        return key in self._holidays

    def __repr__(self) -> str:
        return (
            f"HolidayCollection(provider={self.provider.name!r}, year={self.year}, "
            f"locale={self.locale!r}, holidays={len(self._holidays)})"
        )
