"""National holidays of Japan (国民の祝日)."""

from __future__ import annotations

import datetime
import logging
import math

from feriae.collection import HolidayCollection, Provider
from feriae.holiday import Holiday
from feriae.rules import MONDAY, SUNDAY, new_years_day, nth_weekday, substitute

logger = logging.getLogger(__name__)

# The holiday law (祝日法) took effect on 20 July 1948.
ESTABLISHMENT_YEAR = 1948

# Sunday holidays are substituted from this date onward.
SUBSTITUTION_START = datetime.date(1973, 4, 12)

# Equinox day approximation published by the National Astronomical Observatory.
EQUINOX_GRADIENT = 0.242194
VERNAL_EQUINOX = {1979: 20.8357, 2099: 20.8431, 2150: 21.8510}
AUTUMNAL_EQUINOX = {1979: 23.2588, 2099: 23.2488, 2150: 24.2488}

# key, month, day, first year, English name, Japanese name
FIXED_HOLIDAYS = [
    ("nationalFoundationDay", 2, 11, 1966, "National Foundation Day", "建国記念の日"),
    ("constitutionMemorialDay", 5, 3, 1948, "Constitution Memorial Day", "憲法記念日"),
    ("childrensDay", 5, 5, 1948, "Children’s Day", "こどもの日"),
    ("cultureDay", 11, 3, 1948, "Culture Day", "文化の日"),
    ("laborThanksgivingDay", 11, 23, 1948, "Labor Thanksgiving Day", "勤労感謝の日"),
]


def equinox_day(year: int, params: dict[int, float]) -> int | None:
    """Day of month of an equinox in *year*, or ``None`` outside 1948–2150."""
    if year < ESTABLISHMENT_YEAR or year > 2150:
        return None
    if year <= 1979:
        base, leap_offset = params[1979], 1983
    elif year <= 2099:
        base, leap_offset = params[2099], 1980
    else:
        base, leap_offset = params[2150], 1980
    return math.floor(
        base + EQUINOX_GRADIENT * (year - 1980) - math.floor((year - leap_offset) / 4)
    )


def _add(holidays: HolidayCollection, key: str, en: str, ja: str, date: datetime.date) -> None:
    holidays.add(Holiday(key, {"en": en, "ja": ja}, date, holidays.locale))


def _fixed_holidays(holidays: HolidayCollection) -> None:
    year = holidays.year
    for key, month, day, since, en, ja in FIXED_HOLIDAYS:
        if year >= since:
            _add(holidays, key, en, ja, datetime.date(year, month, day))


def _coming_of_age_day(holidays: HolidayCollection) -> None:
    year = holidays.year
    date = nth_weekday(year, 1, MONDAY, 2) if year >= 2000 else datetime.date(year, 1, 15)
    _add(holidays, "comingOfAgeDay", "Coming of Age Day", "成人の日", date)


def _equinox_days(holidays: HolidayCollection) -> None:
    year = holidays.year
    day = equinox_day(year, VERNAL_EQUINOX)
    if day is not None:
        date = datetime.date(year, 3, day)
        _add(holidays, "vernalEquinoxDay", "Vernal Equinox Day", "春分の日", date)
    day = equinox_day(year, AUTUMNAL_EQUINOX)
    if day is not None:
        date = datetime.date(year, 9, day)
        _add(holidays, "autumnalEquinoxDay", "Autumnal Equinox Day", "秋分の日", date)


def _emperor_and_greenery(holidays: HolidayCollection) -> None:
    """April 29 changed names twice; the Emperor's Birthday follows the reign."""
    year = holidays.year
    birthday = None
    if 1949 <= year <= 1988:
        birthday = datetime.date(year, 4, 29)
    elif 1989 <= year <= 2018:
        birthday = datetime.date(year, 12, 23)
    elif year >= 2020:
        birthday = datetime.date(year, 2, 23)
    if birthday is not None:
        _add(holidays, "emperorsBirthday", "Emperor’s Birthday", "天皇誕生日", birthday)

    if year >= 2007:
        _add(holidays, "showaDay", "Showa Day", "昭和の日", datetime.date(year, 4, 29))
        _add(holidays, "greeneryDay", "Greenery Day", "みどりの日", datetime.date(year, 5, 4))
    elif year >= 1989:
        _add(holidays, "greeneryDay", "Greenery Day", "みどりの日", datetime.date(year, 4, 29))


def _moved_holidays(holidays: HolidayCollection) -> None:
    """Holidays whose date moved to Mondays, and the 2020/2021 Olympic shifts."""
    year = holidays.year

    marine = {2020: datetime.date(2020, 7, 23), 2021: datetime.date(2021, 7, 22)}
    if year in marine:
        date = marine[year]
    elif year >= 2003:
        date = nth_weekday(year, 7, MONDAY, 3)
    elif year >= 1996:
        date = datetime.date(year, 7, 20)
    else:
        date = None
    if date is not None:
        _add(holidays, "marineDay", "Marine Day", "海の日", date)

    mountain = {2020: datetime.date(2020, 8, 10), 2021: datetime.date(2021, 8, 8)}
    if year >= 2016:
        date = mountain.get(year, datetime.date(year, 8, 11))
        _add(holidays, "mountainDay", "Mountain Day", "山の日", date)

    if year >= 2003:
        date = nth_weekday(year, 9, MONDAY, 3)
    elif year >= 1966:
        date = datetime.date(year, 9, 15)
    else:
        date = None
    if date is not None:
        _add(holidays, "respectfulForTheAgedDay", "Respect for the Aged Day", "敬老の日", date)

    sports = {2020: datetime.date(2020, 7, 24), 2021: datetime.date(2021, 7, 23)}
    if year in sports:
        _add(holidays, "sportsDay", "Sports Day", "スポーツの日", sports[year])
    elif year >= 2022:
        _add(holidays, "sportsDay", "Sports Day", "スポーツの日", nth_weekday(year, 10, MONDAY, 2))
    elif year >= 2000:
        date = nth_weekday(year, 10, MONDAY, 2)
        _add(holidays, "healthAndSportsDay", "Health And Sports Day", "体育の日", date)
    elif year >= 1966:
        date = datetime.date(year, 10, 10)
        _add(holidays, "healthAndSportsDay", "Health And Sports Day", "体育の日", date)


def _imperial_ceremonies(holidays: HolidayCollection) -> None:
    if holidays.year == 2019:
        _add(holidays, "coronationDay", "Coronation Day", "即位の日", datetime.date(2019, 5, 1))
        _add(
            holidays,
            "enthronementProclamationCeremony",
            "Enthronement Proclamation Ceremony",
            "即位礼正殿の儀",
            datetime.date(2019, 10, 22),
        )


def _substitute_holidays(holidays: HolidayCollection) -> None:
    """A holiday on a Sunday moves the day off to the next non-holiday.

    Until 2006 only the following Monday qualified.
    """
    taken = set(holidays.holiday_dates())
    for holiday in list(holidays):
        if holiday.date.weekday() != SUNDAY or holiday.date < SUBSTITUTION_START:
            continue
        date = holiday.date + datetime.timedelta(days=1)
        if holidays.year >= 2007:
            while date in taken:
                date += datetime.timedelta(days=1)
        elif date in taken:
            continue
        logger.debug("Substituting %s on %s", holiday.key, date)
        holidays.add(substitute(holiday, date, {"en": "Substitute Holiday", "ja": "振替休日"}))
        taken.add(date)


def _bridge_holidays(holidays: HolidayCollection) -> None:
    """A weekday squeezed between two holidays is a citizens' holiday (国民の休日)."""
    if holidays.year < 1986:
        return
    dates = sorted(set(holidays.holiday_dates()))
    counter = 0
    for previous, current in zip(dates, dates[1:]):
        if (current - previous).days != 2:
            continue
        bridge = previous + datetime.timedelta(days=1)
        if bridge.weekday() == SUNDAY:
            continue
        counter += 1
        key = "bridgeDay" if counter == 1 else f"bridgeDay{counter}"
        _add(holidays, key, "Bridge Public holiday", "国民の休日", bridge)


def rules(holidays: HolidayCollection) -> None:
    if holidays.year < ESTABLISHMENT_YEAR:
        return
    holidays.add(new_years_day(holidays.year, holidays.locale))
    _coming_of_age_day(holidays)
    _fixed_holidays(holidays)
    _equinox_days(holidays)
    _emperor_and_greenery(holidays)
    _moved_holidays(holidays)
    _imperial_ceremonies(holidays)
    _substitute_holidays(holidays)
    _bridge_holidays(holidays)


JAPAN = Provider(code="JP", name="Japan", rules=rules)
