"""feriae: public holidays per country and year, with localized names.

Build the holidays of a country for a year, ask whether a date is a
holiday or a working day, and look up holiday names in any supported
locale.
"""

from feriae.collection import HolidayCollection, Provider
from feriae.exceptions import (
    FeriaeError,
    HolidayNotFound,
    InputTypeMismatch,
    InvalidArgument,
    InvalidYear,
    MissingTranslation,
    ProviderNotFound,
    UnknownLocale,
)
from feriae.factory import (
    create,
    create_by_region_code,
    list_providers,
    next_working_day,
    previous_working_day,
)
from feriae.holiday import Holiday, HolidayType, SubstituteHoliday
from feriae.locales import DEFAULT_LOCALE, LOCALE_KEY, LocaleTag
from feriae.translations import Translations

__all__ = [
    "DEFAULT_LOCALE",
    "FeriaeError",
    "Holiday",
    "HolidayCollection",
    "HolidayNotFound",
    "HolidayType",
    "InputTypeMismatch",
    "InvalidArgument",
    "InvalidYear",
    "LOCALE_KEY",
    "LocaleTag",
    "MissingTranslation",
    "Provider",
    "ProviderNotFound",
    "SubstituteHoliday",
    "Translations",
    "UnknownLocale",
    "create",
    "create_by_region_code",
    "list_providers",
    "next_working_day",
    "previous_working_day",
]
