"""Holiday name translations.

Two pieces live here:

* :func:`resolve_name`, which walks a probe order (see
  :func:`feriae.locales.probe_order`) over a ``{locale: name}`` mapping.
* :class:`Translations`, a store of global translations keyed by holiday
  key, loaded from a directory of JSON files.  Holidays copy entries from
  it through :meth:`feriae.holiday.Holiday.merge_global_translations`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from functools import cache
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from feriae.config import load_settings
from feriae.exceptions import InvalidArgument, MissingTranslation, UnknownLocale
from feriae.locales import LOCALE_KEY, LOCALES

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)


class TranslationSource(Protocol):
    """Anything able to hand out the global translations of a holiday key."""

    def get_translations(self, key: str) -> dict[str, str]: ...


def resolve_name(
    key: str,
    translations: Mapping[str, str],
    probe: Iterable[str],
    requested: list[str] | None = None,
) -> str:
    """Return the first name found for the tags in *probe*.

    Reaching ``LOCALE_KEY`` returns *key* itself.  Raises
    ``MissingTranslation`` when the probe order runs out; *requested* is
    the locale list reported in that error (defaults to the probe order).
    """
    probe = list(probe)
    for tag in probe:
        if tag == LOCALE_KEY:
            return key
        name = translations.get(tag)
        if name is not None:
            return name
    raise MissingTranslation(key, requested if requested is not None else probe)


class Translations:
    """Global holiday translations: ``{key: {locale: name}}``."""

    def __init__(self, available_locales: Iterable[str] = LOCALES) -> None:
        self.available_locales = frozenset(available_locales)
        self.translations: dict[str, dict[str, str]] = {}

    def _check_locale(self, locale: str) -> None:
        if locale not in self.available_locales:
            raise UnknownLocale(locale)

    def load_translations(self, directory: Path | Traversable) -> None:
        """Load every ``<key>.json`` file found in *directory*.

        Each file holds a ``{locale: name}`` object.  Files with other
        extensions are ignored.  Entries already present for a key are
        replaced by the ones read from disk.
        """
        if not directory.is_dir():
            raise InvalidArgument(f"Translation directory {str(directory)!r} does not exist.")
        loaded = 0
        for entry in sorted(directory.iterdir(), key=lambda e: e.name):
            if not entry.is_file() or not entry.name.endswith(".json"):
                continue
            key = entry.name[: -len(".json")]
            try:
                data = json.loads(entry.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise InvalidArgument(
                    f"Translation file {entry.name!r} is not valid JSON: {exc}"
                ) from None
            if not isinstance(data, dict) or not all(
                isinstance(name, str) for name in data.values()
            ):
                raise InvalidArgument(
                    f"Translation file {entry.name!r} must hold a {{locale: name}} object."
                )
            for locale in data:
                self._check_locale(locale)
            self.translations.setdefault(key, {}).update(data)
            loaded += 1
        logger.debug("Loaded %d translation files from %s", loaded, directory)

    def add_translation(self, key: str, locale: str, translation: str) -> None:
        self._check_locale(locale)
        self.translations.setdefault(key, {})[locale] = translation

    def get_translation(self, key: str, locale: str) -> str | None:
        return self.translations.get(key, {}).get(locale)

    def get_translations(self, key: str) -> dict[str, str]:
        return dict(self.translations.get(key, {}))

    def keys(self) -> list[str]:
        return sorted(self.translations)


@cache
def bundled_translations() -> Translations:
    """Return the translations shipped with the package.

    Built once per process.  A directory named by
    ``FERIAE_TRANSLATIONS_DIR`` is loaded on top of the bundled files.
    """
    store = Translations()
    store.load_translations(resources.files("feriae") / "data" / "translations")
    extra = load_settings().translations_dir
    if extra is not None:
        store.load_translations(extra)
    return store
