"""Holiday value objects."""

from __future__ import annotations

import datetime
import json
from collections.abc import Iterable, Mapping
from enum import Enum

from feriae.exceptions import InputTypeMismatch, InvalidArgument
from feriae.locales import DEFAULT_LOCALE, LOCALE_KEY, probe_order, validate_locale
from feriae.translations import TranslationSource, resolve_name

SUBSTITUTE_PREFIX = "substituteHoliday:"

#: Key of the global translation holding the name pattern of substitution days.
SUBSTITUTE_PATTERN_KEY = "substituteHoliday"


class HolidayType(str, Enum):
    """Category of a holiday.  Only informational; it does not decide working days."""

    OFFICIAL = "official"
    OBSERVANCE = "observance"
    SEASON = "seasonal"
    BANK = "bank"
    OTHER = "other"


def to_date(value: object) -> datetime.date:
    """Return *value* as a plain ``date``.

    ``datetime`` values are truncated to their date.  Anything else raises
    ``InputTypeMismatch``.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    raise InputTypeMismatch(
        f"Expected a date or datetime, got {type(value).__name__}: {value!r}"
    )


class Holiday:
    """A single named holiday on a given date.

    *translations* maps locale tags to names.  The key and the date are
    read-only; translations may be extended with
    :meth:`merge_global_translations`.
    """

    def __init__(
        self,
        key: str,
        translations: Mapping[str, str],
        date: datetime.date,
        locale: str = DEFAULT_LOCALE,
        type: HolidayType | str = HolidayType.OFFICIAL,  # noqa: A002
    ):
        if not isinstance(key, str) or not key.strip():
            raise InvalidArgument("Holiday key can not be blank.")
        self._key = key
        self.locale = validate_locale(locale)
        self._date = to_date(date)
        try:
            self.type = HolidayType(type)
        except ValueError:
            raise InvalidArgument(f"Unknown holiday type {type!r}.") from None
        self.translations: dict[str, str] = dict(translations)

    @property
    def key(self) -> str:
        return self._key

    @property
    def date(self) -> datetime.date:
        return self._date

    @property
    def weekday(self) -> int:
        """Day of the week, 0 = Sunday … 6 = Saturday."""
        return self._date.isoweekday() % 7

    def get_name(self, locales: Iterable[str] | None = None) -> str:
        """Return the name of the holiday.

        Without *locales* the holiday's own locale is tried, then ``en_US``
        and finally the key itself.  An explicit list is tried in order
        (each tag falling back to its less specific forms) and only ends
        in the key when ``LOCALE_KEY`` is part of it.
        """
        requested = list(locales) if locales is not None else None
        return resolve_name(
            self._key,
            self.translations,
            probe_order(self.locale, requested),
            requested,
        )

    @property
    def name(self) -> str:
        return self.get_name()

    def merge_global_translations(self, source: TranslationSource) -> None:
        """Copy global translations for this key that are not set yet.

        Custom translations given at construction always win.
        """
        for locale, name in source.get_translations(self._key).items():
            self.translations.setdefault(locale, name)

    def to_dict(self) -> dict[str, object]:
        return {
            "key": self._key,
            "name": self.get_name(),
            "type": self.type.value,
            "date": self._date.isoformat(),
            "locale": self.locale,
        }

    def to_json(self, **kwargs: object) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, **kwargs)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Holiday):
            return NotImplemented
        return (self._key, self._date, self.type) == (other._key, other._date, other.type)

    def __lt__(self, other: Holiday) -> bool:
        return (self._date, self._key) < (other._date, other._key)

    def __hash__(self) -> int:
        return hash((self._key, self._date))

    def __str__(self) -> str:
        return self._date.isoformat()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, date={self._date.isoformat()})"


class SubstituteHoliday(Holiday):
    """A day off given in place of a holiday that fell on a non-working day.

    Its key is ``substituteHoliday:<key of the substituted holiday>``.  In a
    collection it is an ordinary entry next to the holiday it replaces.
    """

    def __init__(
        self,
        substituted: Holiday,
        translations: Mapping[str, str],
        date: datetime.date,
        locale: str = DEFAULT_LOCALE,
        type: HolidayType | str = HolidayType.OFFICIAL,  # noqa: A002
    ):
        super().__init__(SUBSTITUTE_PREFIX + substituted.key, translations, date, locale, type)
        if self.date == substituted.date:
            raise InvalidArgument(
                f"Date of substitute for {substituted.key!r} must differ from the original date."
            )
        self.substituted = substituted
        self.patterns: dict[str, str] = {}

    def merge_global_translations(self, source: TranslationSource) -> None:
        for locale, pattern in source.get_translations(SUBSTITUTE_PATTERN_KEY).items():
            self.patterns.setdefault(locale, pattern)
        super().merge_global_translations(source)

    def get_name(self, locales: Iterable[str] | None = None) -> str:
        """Return the name of the substitution day.

        A translation of its own, for any tag of the probe order, wins.
        Otherwise the first matching ``substituteHoliday`` pattern is filled
        in with the name of the substituted holiday.
        """
        requested = list(locales) if locales is not None else None
        probe = probe_order(self.locale, requested)
        tags = [tag for tag in probe if tag != LOCALE_KEY]
        for tag in tags:
            if tag in self.translations:
                return self.translations[tag]
        for tag in tags:
            if tag in self.patterns:
                name = self.substituted.get_name(requested)
                return self.patterns[tag].replace("{0}", name)
        return resolve_name(self.key, {}, probe, requested)
