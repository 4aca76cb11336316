"""Federal holidays of the United States.

Observed rules: a fixed-date holiday on a Saturday gets a substitute on
the preceding Friday, one on a Sunday on the following Monday.
Substitutes that would land in another year are left out.
"""

from __future__ import annotations

import datetime

from feriae.collection import HolidayCollection, Provider
from feriae.holiday import Holiday
from feriae.rules import (
    MONDAY,
    THURSDAY,
    christmas_day,
    last_weekday,
    new_years_day,
    nth_weekday,
    observed,
    substitute,
)


def _holiday(holidays: HolidayCollection, key: str, en: str, date: datetime.date) -> Holiday:
    holiday = Holiday(key, {"en": en}, date, holidays.locale)
    holidays.add(holiday)
    return holiday


def _observed_holidays(holidays: HolidayCollection, originals: list[Holiday]) -> None:
    for holiday in originals:
        date = observed(holiday.date)
        if date != holiday.date and date.year == holidays.year:
            holidays.add(substitute(holiday, date))


def rules(holidays: HolidayCollection) -> None:
    year, locale = holidays.year, holidays.locale
    fixed: list[Holiday] = []

    if year >= 1870:
        holiday = new_years_day(year, locale)
        holidays.add(holiday)
        fixed.append(holiday)

    if year >= 1986:
        date = nth_weekday(year, 1, MONDAY, 3)
        _holiday(holidays, "martinLutherKingDay", "Dr. Martin Luther King Jr’s Birthday", date)

    if year >= 1879:
        date = nth_weekday(year, 2, MONDAY, 3) if year >= 1968 else datetime.date(year, 2, 22)
        _holiday(holidays, "washingtonsBirthday", "Washington’s Birthday", date)

    if year >= 1865:
        date = last_weekday(year, 5, MONDAY) if year >= 1968 else datetime.date(year, 5, 30)
        _holiday(holidays, "memorialDay", "Memorial Day", date)

    if year >= 2021:
        date = datetime.date(year, 6, 19)
        fixed.append(_holiday(holidays, "juneteenth", "Juneteenth", date))

    if year >= 1776:
        date = datetime.date(year, 7, 4)
        fixed.append(_holiday(holidays, "independenceDay", "Independence Day", date))

    if year >= 1887:
        _holiday(holidays, "labourDay", "Labour Day", nth_weekday(year, 9, MONDAY, 1))

    if year >= 1937:
        date = nth_weekday(year, 10, MONDAY, 2) if year >= 1970 else datetime.date(year, 10, 12)
        _holiday(holidays, "columbusDay", "Columbus Day", date)

    if year >= 1919:
        date = datetime.date(year, 11, 11)
        if year >= 1954:
            fixed.append(_holiday(holidays, "veteransDay", "Veterans Day", date))
        else:
            fixed.append(_holiday(holidays, "armisticeDay", "Armistice Day", date))

    if year >= 1863:
        date = nth_weekday(year, 11, THURSDAY, 4)
        _holiday(holidays, "thanksgivingDay", "Thanksgiving Day", date)

    holiday = christmas_day(year, locale)
    holidays.add(holiday)
    fixed.append(holiday)

    _observed_holidays(holidays, fixed)


USA = Provider(code="US", name="USA", rules=rules)
