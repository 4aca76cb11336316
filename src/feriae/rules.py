"""Building blocks shared by the country rule-sets.

Date helpers plus small factories for holidays that many countries
observe.  Every factory is a pure function of a year and a locale and
returns a :class:`~feriae.holiday.Holiday` keyed the same way everywhere,
so the bundled global translations give it a name.
"""

from __future__ import annotations

import datetime

from dateutil.easter import EASTER_WESTERN, easter

from feriae.holiday import Holiday, HolidayType, SubstituteHoliday

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

OFFICIAL = HolidayType.OFFICIAL
OBSERVANCE = HolidayType.OBSERVANCE

# ---------------------------------------------------------------------------
# Date helpers
# ---------------------------------------------------------------------------


def nth_weekday(year: int, month: int, weekday: int, n: int) -> datetime.date:
    """Return the *n*-th occurrence of *weekday* in *month* of *year*.

    *weekday* follows ``datetime`` convention: 0 = Monday … 6 = Sunday.
    *n* is 1-based (1 = first, 2 = second, …).
    """
    first = datetime.date(year, month, 1)
    # Days until the first target weekday
    delta = (weekday - first.weekday()) % 7
    first_occurrence = first + datetime.timedelta(days=delta)
    return first_occurrence + datetime.timedelta(weeks=n - 1)


def last_weekday(year: int, month: int, weekday: int) -> datetime.date:
    """Return the last occurrence of *weekday* in *month* of *year*."""
    if month == 12:
        last = datetime.date(year, 12, 31)
    else:
        last = datetime.date(year, month + 1, 1) - datetime.timedelta(days=1)
    delta = (last.weekday() - weekday) % 7
    return last - datetime.timedelta(days=delta)


def next_weekday(d: datetime.date, weekday: int) -> datetime.date:
    """Return the first *weekday* strictly after *d*."""
    delta = (weekday - d.weekday()) % 7 or 7
    return d + datetime.timedelta(days=delta)


def observed(d: datetime.date) -> datetime.date:
    """Shift a date to its *observed* date (Sat→Fri, Sun→Mon)."""
    if d.weekday() == SATURDAY:
        return d - datetime.timedelta(days=1)
    if d.weekday() == SUNDAY:
        return d + datetime.timedelta(days=1)
    return d


def easter_sunday(year: int) -> datetime.date:
    return easter(year, EASTER_WESTERN)


def substitute(
    holiday: Holiday,
    date: datetime.date,
    translations: dict[str, str] | None = None,
) -> SubstituteHoliday:
    """Build the substitution day of *holiday* on *date*, same locale and type."""
    return SubstituteHoliday(holiday, translations or {}, date, holiday.locale, holiday.type)


def _fixed(key: str, year: int, month: int, day: int, locale: str, kind: HolidayType) -> Holiday:
    return Holiday(key, {}, datetime.date(year, month, day), locale, kind)


def _from_easter(key: str, year: int, days: int, locale: str, kind: HolidayType) -> Holiday:
    return Holiday(key, {}, easter_sunday(year) + datetime.timedelta(days=days), locale, kind)


# ---------------------------------------------------------------------------
# Common holidays
# ---------------------------------------------------------------------------


def new_years_day(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _fixed("newYearsDay", year, 1, 1, locale, kind)


def valentines_day(year: int, locale: str, kind: HolidayType = OBSERVANCE) -> Holiday:
    return _fixed("valentinesDay", year, 2, 14, locale, kind)


def international_workers_day(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _fixed("internationalWorkersDay", year, 5, 1, locale, kind)


def world_animal_day(year: int, locale: str, kind: HolidayType = OBSERVANCE) -> Holiday:
    return _fixed("worldAnimalDay", year, 10, 4, locale, kind)


def halloween(year: int, locale: str, kind: HolidayType = OBSERVANCE) -> Holiday:
    return _fixed("halloween", year, 10, 31, locale, kind)


def summer_time(year: int, locale: str) -> Holiday:
    """Start of daylight saving time in the EU (last Sunday of March)."""
    return Holiday("summerTime", {}, last_weekday(year, 3, SUNDAY), locale, HolidayType.SEASON)


def winter_time(year: int, locale: str) -> Holiday:
    """End of daylight saving time in the EU (last Sunday of October)."""
    return Holiday("winterTime", {}, last_weekday(year, 10, SUNDAY), locale, HolidayType.SEASON)


# ---------------------------------------------------------------------------
# Christian holidays
# ---------------------------------------------------------------------------


def epiphany(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _fixed("epiphany", year, 1, 6, locale, kind)


def ash_wednesday(year: int, locale: str, kind: HolidayType = OBSERVANCE) -> Holiday:
    return _from_easter("ashWednesday", year, -46, locale, kind)


def good_friday(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _from_easter("goodFriday", year, -2, locale, kind)


def easter_day(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _from_easter("easter", year, 0, locale, kind)


def easter_monday(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _from_easter("easterMonday", year, 1, locale, kind)


def ascension_day(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _from_easter("ascensionDay", year, 39, locale, kind)


def pentecost(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _from_easter("pentecost", year, 49, locale, kind)


def pentecost_monday(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _from_easter("pentecostMonday", year, 50, locale, kind)


def st_martins_day(year: int, locale: str, kind: HolidayType = OBSERVANCE) -> Holiday:
    return _fixed("stMartinsDay", year, 11, 11, locale, kind)


def st_nicholas_day(year: int, locale: str, kind: HolidayType = OBSERVANCE) -> Holiday:
    return _fixed("stNicholasDay", year, 12, 5, locale, kind)


def christmas_day(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _fixed("christmasDay", year, 12, 25, locale, kind)


def second_christmas_day(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _fixed("secondChristmasDay", year, 12, 26, locale, kind)


def st_stephens_day(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _fixed("stStephensDay", year, 12, 26, locale, kind)


def boxing_day(year: int, locale: str, kind: HolidayType = OFFICIAL) -> Holiday:
    return _fixed("boxingDay", year, 12, 26, locale, kind)
