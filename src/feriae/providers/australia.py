"""Public holidays of Australia and of the state of Western Australia.

The national rules apply to every state; a state's rules add its own
days on top of them.
"""

from __future__ import annotations

import datetime

from feriae.collection import HolidayCollection, Provider
from feriae.holiday import Holiday
from feriae.rules import (
    MONDAY,
    SATURDAY,
    SUNDAY,
    boxing_day,
    christmas_day,
    easter_monday,
    good_friday,
    last_weekday,
    new_years_day,
    next_weekday,
    nth_weekday,
    substitute,
)

WEEKEND = (SATURDAY, SUNDAY)


def _add_monday_substitute(holidays: HolidayCollection, holiday: Holiday) -> None:
    holidays.add(holiday)
    if holiday.date.weekday() in WEEKEND:
        holidays.add(substitute(holiday, next_weekday(holiday.date, MONDAY)))


def _add_christmas(holidays: HolidayCollection) -> None:
    """Christmas and Boxing Day in the weekend are both made up two days later."""
    for holiday in (
        christmas_day(holidays.year, holidays.locale),
        boxing_day(holidays.year, holidays.locale),
    ):
        holidays.add(holiday)
        if holiday.date.weekday() in WEEKEND:
            holidays.add(substitute(holiday, holiday.date + datetime.timedelta(days=2)))


def national_rules(holidays: HolidayCollection) -> None:
    year, locale = holidays.year, holidays.locale

    _add_monday_substitute(holidays, new_years_day(year, locale))

    if year >= 1935:
        australia_day = Holiday(
            "australiaDay", {"en": "Australia Day"}, datetime.date(year, 1, 26), locale
        )
        if year >= 1994:
            _add_monday_substitute(holidays, australia_day)
        else:
            holidays.add(australia_day)

    holidays.add(good_friday(year, locale))
    holidays.add(easter_monday(year, locale))

    if year >= 1921:
        holidays.add(Holiday("anzacDay", {"en": "ANZAC Day"}, datetime.date(year, 4, 25), locale))

    _add_christmas(holidays)


def western_australia_rules(holidays: HolidayCollection) -> None:
    national_rules(holidays)
    year, locale = holidays.year, holidays.locale

    anzac = holidays.all().get("anzacDay")
    if anzac is not None and anzac.date.weekday() in WEEKEND:
        holidays.add(substitute(anzac, next_weekday(anzac.date, MONDAY)))

    date = nth_weekday(year, 3, MONDAY, 1)
    holidays.add(Holiday("labourDay", {"en": "Labour Day"}, date, locale))

    if year >= 1833:
        date = nth_weekday(year, 6, MONDAY, 1)
        holidays.add(
            Holiday("westernAustraliaDay", {"en": "Western Australia Day"}, date, locale)
        )

    # Proclaimed each year; in practice the last Monday of September.
    date = last_weekday(year, 9, MONDAY)
    if year >= 2023:
        holidays.add(Holiday("kingsBirthday", {"en": "King’s Birthday"}, date, locale))
    else:
        holidays.add(Holiday("queensBirthday", {"en": "Queen’s Birthday"}, date, locale))


AUSTRALIA = Provider(code="AU", name="Australia", rules=national_rules)
WESTERN_AUSTRALIA = Provider(
    code="AU-WA", name="Australia/WesternAustralia", rules=western_australia_rules
)
