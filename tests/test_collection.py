from __future__ import annotations

import datetime
from unittest.mock import Mock

import pytest

from feriae.collection import HolidayCollection, Provider, validate_year
from feriae.exceptions import (
    HolidayNotFound,
    InputTypeMismatch,
    InvalidArgument,
    InvalidYear,
    UnknownLocale,
)
from feriae.holiday import Holiday, HolidayType
from feriae.rules import observed, substitute
from feriae.translations import Translations


def _rules(holidays: HolidayCollection) -> None:
    year, locale = holidays.year, holidays.locale
    holidays.add(Holiday("newYearsDay", {"en": "New Year"}, datetime.date(year, 1, 1), locale))
    if year >= 2000:
        date = datetime.date(year, 6, 15)
        holidays.add(
            Holiday("millenniumDay", {"en": "Millennium Day"}, date, locale, HolidayType.OBSERVANCE)
        )
    independence = Holiday(
        "independenceDay", {"en": "Independence Day"}, datetime.date(year, 7, 4), locale
    )
    holidays.add(independence)
    if independence.date.weekday() >= 5:
        holidays.add(substitute(independence, observed(independence.date)))


TESTLAND = Provider(code="XT", name="Testland", rules=_rules)


def _collection(year: int = 2020, **kwargs: object) -> HolidayCollection:
    return HolidayCollection(TESTLAND, year, **kwargs)  # type: ignore[arg-type]


class TestConstruction:
    @pytest.mark.parametrize("year", [999, 10100, "2020", 2020.0, True])
    def test_invalid_year(self, year: object) -> None:
        with pytest.raises(InvalidYear):
            _collection(year)  # type: ignore[arg-type]

    def test_bounds(self) -> None:
        assert _collection(1000).year == 1000
        assert _collection(9999).year == 9999

    def test_year_checked_before_rules(self) -> None:
        rules = Mock()
        with pytest.raises(InvalidYear):
            HolidayCollection(Provider("XX", "Broken", rules), 10100)
        rules.assert_not_called()

    def test_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocale):
            _collection(locale="wx_YZ")

    def test_invalid_year_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_year(0)

    def test_rules_ran(self) -> None:
        holidays = _collection()
        assert holidays.names() == [
            "newYearsDay",
            "millenniumDay",
            "independenceDay",
            "substituteHoliday:independenceDay",
        ]
        assert "millenniumDay" not in _collection(1999)


class TestMutation:
    def test_add_existing_key_is_ignored(self) -> None:
        holidays = _collection()
        before = holidays.names()
        holidays.add(Holiday("newYearsDay", {"en": "Other"}, datetime.date(2020, 1, 2)))
        assert holidays.names() == before
        assert holidays.when_is("newYearsDay") == "2020-01-01"

    def test_add_twice(self) -> None:
        holidays = _collection()
        extra = Holiday("testHoliday", {}, datetime.date(2020, 3, 3))
        holidays.add(extra)
        holidays.add(extra)
        assert len(holidays) == 5
        assert holidays.count() == 4

    def test_add_wrong_type(self) -> None:
        holidays = _collection()
        with pytest.raises(InputTypeMismatch):
            holidays.add("newYearsDay")  # type: ignore[arg-type]
        assert len(holidays) == 4

    def test_remove(self) -> None:
        holidays = _collection()
        holidays.remove("millenniumDay")
        assert "millenniumDay" not in holidays
        assert len(holidays) == 3

    def test_remove_unknown_key(self) -> None:
        holidays = _collection()
        holidays.remove("nope")
        assert len(holidays) == 4

    def test_add_merges_global_translations(self) -> None:
        source = Mock(spec=Translations)
        source.get_translations.return_value = {"nl_NL": "Test"}
        empty = Provider("XE", "Empty", lambda h: None)
        holidays = HolidayCollection(empty, 2020, "nl_NL", source)

        holidays.add(Holiday("testHoliday", {}, datetime.date(2020, 3, 3), "nl_NL"))
        holidays.add(Holiday("testHoliday", {}, datetime.date(2020, 3, 3), "nl_NL"))

        source.get_translations.assert_called_once_with("testHoliday")
        assert holidays.get("testHoliday").get_name() == "Test"


class TestLookup:
    @pytest.mark.parametrize("key", ["", "  "])
    def test_get_blank_key(self, key: str) -> None:
        with pytest.raises(InvalidArgument):
            _collection().get(key)

    def test_get_missing(self) -> None:
        with pytest.raises(HolidayNotFound):
            _collection().get("nope")

    def test_not_found_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            _collection().get("nope")

    def test_all_is_a_copy(self) -> None:
        holidays = _collection()
        holidays.all().clear()
        assert len(holidays) == 4

    def test_count_merges_substitutes(self) -> None:
        holidays = _collection()
        assert len(holidays) == 4
        assert len(holidays.all()) == 4
        assert holidays.count() == 3

    def test_when_is(self) -> None:
        assert _collection().when_is("substituteHoliday:independenceDay") == "2020-07-03"

    def test_what_week_day_is(self) -> None:
        holidays = _collection()
        assert holidays.what_week_day_is("millenniumDay") == 1
        assert holidays.what_week_day_is("independenceDay") == 6

    def test_holiday_dates(self) -> None:
        assert datetime.date(2020, 7, 3) in _collection().holiday_dates()

    def test_iteration_follows_insertion(self) -> None:
        assert [h.key for h in _collection()] == _collection().names()


class TestDateQueries:
    def test_is_holiday(self) -> None:
        holidays = _collection()
        assert holidays.is_holiday(datetime.date(2020, 6, 15))
        assert not holidays.is_holiday(datetime.date(2020, 6, 14))
        assert not holidays.is_holiday(datetime.date(2020, 6, 16))

    def test_is_holiday_accepts_datetime(self) -> None:
        assert _collection().is_holiday(datetime.datetime(2020, 6, 15, 8, 30))

    def test_is_holiday_wrong_type(self) -> None:
        with pytest.raises(InputTypeMismatch):
            _collection().is_holiday("2020-06-15")  # type: ignore[arg-type]

    def test_observance_is_still_a_holiday(self) -> None:
        holidays = _collection()
        assert holidays.get("millenniumDay").type is HolidayType.OBSERVANCE
        assert not holidays.is_working_day(datetime.date(2020, 6, 15))

    def test_is_working_day(self) -> None:
        holidays = _collection()
        assert holidays.is_working_day(datetime.date(2020, 6, 16))
        assert not holidays.is_working_day(datetime.date(2020, 6, 13))
        assert not holidays.is_working_day(datetime.date(2020, 7, 3))

    def test_custom_weekend(self) -> None:
        provider = Provider("XF", "Fridays", _rules, weekend_days=frozenset({4, 5}))
        holidays = HolidayCollection(provider, 2020)
        assert holidays.is_weekend_day(datetime.date(2020, 6, 19))
        assert not holidays.is_working_day(datetime.date(2020, 6, 19))
        assert holidays.is_working_day(datetime.date(2020, 6, 21))

    def test_on(self) -> None:
        holidays = _collection()
        assert [h.key for h in holidays.on(datetime.date(2020, 1, 1))] == ["newYearsDay"]
        assert holidays.on(datetime.date(2020, 1, 2)) == []

    def test_between(self) -> None:
        found = _collection().between(datetime.date(2020, 1, 1), datetime.date(2020, 7, 3))
        assert [h.key for h in found] == [
            "newYearsDay",
            "millenniumDay",
            "substituteHoliday:independenceDay",
        ]

    def test_between_exclusive(self) -> None:
        found = _collection().between(
            datetime.date(2020, 1, 1), datetime.date(2020, 7, 3), equal=False
        )
        assert [h.key for h in found] == ["millenniumDay"]

    def test_between_reversed(self) -> None:
        with pytest.raises(InvalidArgument):
            _collection().between(datetime.date(2020, 7, 3), datetime.date(2020, 1, 1))

    def test_of_type(self) -> None:
        holidays = _collection()
        assert [h.key for h in holidays.of_type(HolidayType.OBSERVANCE)] == ["millenniumDay"]
        assert len(holidays.of_type("official", "observance")) == 4
        assert holidays.of_type(HolidayType.BANK) == []


class TestNavigation:
    def test_next(self) -> None:
        holiday = _collection().next("millenniumDay")
        assert holiday.date == datetime.date(2021, 6, 15)

    def test_previous(self) -> None:
        holiday = _collection().previous("newYearsDay")
        assert holiday.date == datetime.date(2019, 1, 1)

    def test_previous_not_established(self) -> None:
        with pytest.raises(HolidayNotFound):
            _collection(2000).previous("millenniumDay")

    def test_next_blank_key(self) -> None:
        with pytest.raises(InvalidArgument):
            _collection().next("")

    def test_next_after_upper_bound(self) -> None:
        with pytest.raises(InvalidYear):
            _collection(9999).next("newYearsDay")

    def test_previous_before_lower_bound(self) -> None:
        with pytest.raises(InvalidYear):
            _collection(1000).previous("newYearsDay")

    def test_keeps_locale(self) -> None:
        assert _collection(locale="nl_NL").next("newYearsDay").locale == "nl_NL"
