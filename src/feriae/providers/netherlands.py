"""Holidays of the Netherlands.

Besides the official days off this includes a number of widely observed
days (carnival, Sinterklaas, Prinsjesdag, ...) and the switches to and from
daylight saving time.
"""

from __future__ import annotations

import datetime

from feriae.collection import HolidayCollection, Provider
from feriae.holiday import Holiday, HolidayType
from feriae.rules import (
    OBSERVANCE,
    OFFICIAL,
    SUNDAY,
    TUESDAY,
    ascension_day,
    ash_wednesday,
    christmas_day,
    easter_day,
    easter_monday,
    easter_sunday,
    epiphany,
    good_friday,
    halloween,
    international_workers_day,
    new_years_day,
    nth_weekday,
    pentecost,
    pentecost_monday,
    second_christmas_day,
    st_martins_day,
    st_nicholas_day,
    summer_time,
    valentines_day,
    winter_time,
    world_animal_day,
)


def _holiday(
    holidays: HolidayCollection,
    key: str,
    en: str,
    nl: str,
    date: datetime.date,
    type: HolidayType = OBSERVANCE,  # noqa: A002
) -> None:
    holidays.add(Holiday(key, {"en": en, "nl": nl}, date, holidays.locale, type))


def _carnival(holidays: HolidayCollection) -> None:
    """Carnival runs from the Sunday to the Tuesday before Ash Wednesday."""
    easter = easter_sunday(holidays.year)
    days = [
        ("carnivalDay", "Carnival", "Carnaval", 49),
        ("secondCarnivalDay", "Carnival", "Carnaval", 48),
        ("thirdCarnivalDay", "Carnival", "Carnaval", 47),
    ]
    for key, en, nl, before in days:
        _holiday(holidays, key, en, nl, easter - datetime.timedelta(days=before))


def _royal_day(holidays: HolidayCollection) -> None:
    """King's Day from 2014, Queen's Day from 1891 to 2013."""
    year = holidays.year
    if year >= 2014:
        date = datetime.date(year, 4, 27)
        if date.weekday() == SUNDAY:
            date -= datetime.timedelta(days=1)
        _holiday(holidays, "kingsDay", "King’s Day", "Koningsdag", date, OFFICIAL)
        return
    if year < 1891:
        return
    if year <= 1948:
        date = datetime.date(year, 8, 31)
        if date.weekday() == SUNDAY:
            date += datetime.timedelta(days=1)
    else:
        date = datetime.date(year, 4, 30)
        if date.weekday() == SUNDAY:
            date += datetime.timedelta(days=1) if year < 1980 else -datetime.timedelta(days=1)
    _holiday(holidays, "queensDay", "Queen’s Day", "Koninginnedag", date, OFFICIAL)


def rules(holidays: HolidayCollection) -> None:
    year, locale = holidays.year, holidays.locale

    holidays.add(new_years_day(year, locale))
    holidays.add(easter_day(year, locale))
    holidays.add(easter_monday(year, locale))
    holidays.add(ascension_day(year, locale))
    holidays.add(pentecost(year, locale))
    holidays.add(pentecost_monday(year, locale))
    holidays.add(christmas_day(year, locale))
    holidays.add(second_christmas_day(year, locale))
    _royal_day(holidays)

    if year >= 1947:
        # Liberation Day is a day off every fifth year.
        liberation_type = OFFICIAL if year % 5 == 0 else OBSERVANCE
        date = datetime.date(year, 5, 5)
        _holiday(
            holidays, "liberationDay", "Liberation Day", "Bevrijdingsdag", date, liberation_type
        )
        date = datetime.date(year, 5, 4)
        _holiday(holidays, "commemorationDay", "Commemoration Day", "Dodenherdenking", date)

    holidays.add(epiphany(year, locale, OBSERVANCE))
    holidays.add(valentines_day(year, locale))
    _carnival(holidays)
    holidays.add(ash_wednesday(year, locale))
    holidays.add(good_friday(year, locale, OBSERVANCE))
    holidays.add(international_workers_day(year, locale, OBSERVANCE))
    _holiday(holidays, "mothersDay", "Mother’s Day", "Moederdag", nth_weekday(year, 5, SUNDAY, 2))
    _holiday(holidays, "fathersDay", "Father’s Day", "Vaderdag", nth_weekday(year, 6, SUNDAY, 3))
    date = nth_weekday(year, 9, TUESDAY, 3)
    _holiday(holidays, "princesDay", "Prince’s Day", "Prinsjesdag", date)
    if year >= 1931:
        holidays.add(world_animal_day(year, locale))
    holidays.add(halloween(year, locale))
    holidays.add(st_martins_day(year, locale))
    holidays.add(st_nicholas_day(year, locale))

    if year >= 1977:
        holidays.add(summer_time(year, locale))
        holidays.add(winter_time(year, locale))


NETHERLANDS = Provider(code="NL", name="Netherlands", rules=rules)
