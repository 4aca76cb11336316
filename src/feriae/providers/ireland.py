"""Public holidays of Ireland.

When New Year's Day, St. Patrick's Day or St. Stephen's Day fall in the
weekend, the following Monday is a day off.  Christmas Day in the weekend
moves to the following Tuesday, as the Monday is then taken by St.
Stephen's Day.
"""

from __future__ import annotations

import datetime

from feriae.collection import HolidayCollection, Provider
from feriae.holiday import Holiday
from feriae.rules import (
    MONDAY,
    OBSERVANCE,
    SATURDAY,
    SUNDAY,
    TUESDAY,
    christmas_day,
    easter_day,
    easter_monday,
    good_friday,
    last_weekday,
    new_years_day,
    next_weekday,
    nth_weekday,
    pentecost,
    pentecost_monday,
    st_stephens_day,
    substitute,
)


def _add_with_substitute(holidays: HolidayCollection, holiday: Holiday, weekday: int) -> None:
    """Add *holiday*, plus a substitute on the next *weekday* when it is in the weekend."""
    holidays.add(holiday)
    if holiday.date.weekday() in (SATURDAY, SUNDAY):
        holidays.add(substitute(holiday, next_weekday(holiday.date, weekday)))


def _first_monday(holidays: HolidayCollection, key: str, month: int, en: str, ga: str) -> None:
    date = nth_weekday(holidays.year, month, MONDAY, 1)
    holidays.add(Holiday(key, {"en": en, "ga": ga}, date, holidays.locale))


def rules(holidays: HolidayCollection) -> None:
    year, locale = holidays.year, holidays.locale

    if year >= 1974:
        _add_with_substitute(holidays, new_years_day(year, locale), MONDAY)

    if year >= 1903:
        st_patrick = Holiday(
            "stPatricksDay",
            {"en": "St. Patrick’s Day", "ga": "Lá Fhéile Pádraig"},
            datetime.date(year, 3, 17),
            locale,
        )
        _add_with_substitute(holidays, st_patrick, MONDAY)

    holidays.add(good_friday(year, locale, OBSERVANCE))
    holidays.add(easter_day(year, locale))
    holidays.add(easter_monday(year, locale))

    if year >= 1994:
        _first_monday(holidays, "mayDay", 5, "May Day", "Lá Bealtaine")

    holidays.add(pentecost(year, locale))
    if year <= 1973:
        holidays.add(pentecost_monday(year, locale))
    else:
        _first_monday(holidays, "juneHoliday", 6, "June Holiday", "Lá Saoire i mí Meithimh")

    _first_monday(holidays, "augustHoliday", 8, "August Holiday", "Lá Saoire i mí Lúnasa")

    if year >= 1977:
        date = last_weekday(year, 10, MONDAY)
        holidays.add(
            Holiday(
                "octoberHoliday",
                {"en": "October Holiday", "ga": "Lá Saoire i mí Dheireadh Fómhair"},
                date,
                locale,
            )
        )

    _add_with_substitute(holidays, christmas_day(year, locale), TUESDAY)
    _add_with_substitute(holidays, st_stephens_day(year, locale), MONDAY)


IRELAND = Provider(code="IE", name="Ireland", rules=rules)
