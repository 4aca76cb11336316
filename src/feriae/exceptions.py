"""Exceptions raised by feriae."""


class FeriaeError(Exception):
    """Base error for all feriae failures."""

    def __str__(self) -> str:
        # KeyError subclasses would otherwise quote the message.
        return Exception.__str__(self)


class InvalidArgument(FeriaeError, ValueError):
    """Raised when a blank key or an otherwise unusable argument is given."""


class UnknownLocale(FeriaeError, ValueError):
    """Raised when a locale is not in the supported set."""

    def __init__(self, locale: str) -> None:
        super().__init__(f"Locale {locale!r} is not a valid locale.")
        self.locale = locale


class MissingTranslation(FeriaeError, LookupError):
    """Raised when none of the requested locales has a name for a holiday."""

    def __init__(self, key: str, locales: list[str]) -> None:
        super().__init__(
            f"Translation for {key!r} not found for any locale: {', '.join(locales)}"
        )
        self.key = key
        self.locales = locales


class InvalidYear(FeriaeError, ValueError):
    """Raised when a year falls outside the supported range."""


class ProviderNotFound(FeriaeError, KeyError):
    """Raised when a country or region identifier has no registered provider."""


class HolidayNotFound(FeriaeError, KeyError):
    """Raised when a collection holds no holiday for the requested key."""


class InputTypeMismatch(FeriaeError, TypeError):
    """Raised when a value is not a calendar date (or a holiday) where one is required."""
