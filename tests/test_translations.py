from __future__ import annotations

import json
import pathlib
from collections.abc import Iterator

import pytest

from feriae.config import TRANSLATIONS_DIR_ENV
from feriae.exceptions import InvalidArgument, MissingTranslation, UnknownLocale
from feriae.locales import LOCALE_KEY
from feriae.translations import Translations, bundled_translations, resolve_name


def _write(directory: pathlib.Path, key: str, data: dict[str, str]) -> None:
    (directory / f"{key}.json").write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def fresh_bundle() -> Iterator[None]:
    bundled_translations.cache_clear()
    yield
    bundled_translations.cache_clear()


class TestResolveName:
    def test_first_match_wins(self) -> None:
        names = {"de": "DE", "en": "EN"}
        assert resolve_name("x", names, ["fr", "de", "en"]) == "DE"

    def test_key_sentinel(self) -> None:
        assert resolve_name("testHoliday", {}, ["fr", LOCALE_KEY]) == "testHoliday"

    def test_sentinel_only_reached_in_order(self) -> None:
        assert resolve_name("testHoliday", {"fr": "FR"}, ["fr", LOCALE_KEY]) == "FR"

    def test_missing(self) -> None:
        with pytest.raises(MissingTranslation) as info:
            resolve_name("testHoliday", {"de": "DE"}, ["it"], ["it"])
        assert info.value.key == "testHoliday"
        assert info.value.locales == ["it"]
        assert "testHoliday" in str(info.value)


class TestTranslationsStore:
    def test_add_and_get(self) -> None:
        store = Translations()
        store.add_translation("newYearsDay", "nl_NL", "Nieuwjaar")
        assert store.get_translation("newYearsDay", "nl_NL") == "Nieuwjaar"
        assert store.get_translation("newYearsDay", "de_DE") is None
        assert store.get_translations("newYearsDay") == {"nl_NL": "Nieuwjaar"}

    def test_unknown_key_gives_empty_mapping(self) -> None:
        assert Translations().get_translations("nope") == {}

    def test_get_translations_returns_copy(self) -> None:
        store = Translations()
        store.add_translation("newYearsDay", "nl_NL", "Nieuwjaar")
        store.get_translations("newYearsDay")["de_DE"] = "Neujahr"
        assert store.get_translation("newYearsDay", "de_DE") is None

    def test_add_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocale):
            Translations().add_translation("newYearsDay", "wx_YZ", "?")

    def test_restricted_locales(self) -> None:
        store = Translations(["en_US"])
        with pytest.raises(UnknownLocale):
            store.add_translation("newYearsDay", "nl_NL", "Nieuwjaar")

    def test_load_directory(self, tmp_path: pathlib.Path) -> None:
        _write(tmp_path, "newYearsDay", {"en_US": "New Year’s Day", "nl_NL": "Nieuwjaar"})
        _write(tmp_path, "christmasDay", {"en_US": "Christmas"})
        (tmp_path / "README.txt").write_text("not a translation", encoding="utf-8")

        store = Translations()
        store.load_translations(tmp_path)

        assert store.keys() == ["christmasDay", "newYearsDay"]
        assert store.get_translation("newYearsDay", "nl_NL") == "Nieuwjaar"

    def test_load_invalid_json(self, tmp_path: pathlib.Path) -> None:
        (tmp_path / "newYearsDay.json").write_text('{"en_US": "x",', encoding="utf-8")
        with pytest.raises(InvalidArgument, match="newYearsDay.json"):
            Translations().load_translations(tmp_path)

    @pytest.mark.parametrize("content", ['["New Year"]', '"New Year"', '{"en_US": 1}'])
    def test_load_not_a_name_mapping(self, tmp_path: pathlib.Path, content: str) -> None:
        (tmp_path / "newYearsDay.json").write_text(content, encoding="utf-8")
        with pytest.raises(InvalidArgument, match="newYearsDay.json"):
            Translations().load_translations(tmp_path)

    def test_load_missing_directory(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(InvalidArgument):
            Translations().load_translations(tmp_path / "nope")

    def test_load_directory_with_unknown_locale(self, tmp_path: pathlib.Path) -> None:
        _write(tmp_path, "newYearsDay", {"wx_YZ": "?"})
        with pytest.raises(UnknownLocale):
            Translations().load_translations(tmp_path)


class TestBundledTranslations:
    def test_bundled_names(self, fresh_bundle: None) -> None:
        store = bundled_translations()
        assert store.get_translation("newYearsDay", "en_US") == "New Year’s Day"
        assert store.get_translation("newYearsDay", "ja_JP") == "元日"
        assert store.get_translation("substituteHoliday", "en_US") == "{0} observed"

    def test_bundled_is_built_once(self, fresh_bundle: None) -> None:
        assert bundled_translations() is bundled_translations()

    def test_overlay_directory(
        self, fresh_bundle: None, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write(tmp_path, "newYearsDay", {"en_US": "Happy New Year"})
        _write(tmp_path, "kermis", {"nl_NL": "Kermis"})
        monkeypatch.setenv(TRANSLATIONS_DIR_ENV, str(tmp_path))

        store = bundled_translations()

        assert store.get_translation("newYearsDay", "en_US") == "Happy New Year"
        assert store.get_translation("newYearsDay", "nl_NL") == "Nieuwjaar"
        assert store.get_translation("kermis", "nl_NL") == "Kermis"
