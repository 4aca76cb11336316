"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from feriae.locales import DEFAULT_LOCALE

YEAR_LOWER_BOUND = 1000
YEAR_UPPER_BOUND = 9999

LOCALE_ENV = "FERIAE_LOCALE"
TRANSLATIONS_DIR_ENV = "FERIAE_TRANSLATIONS_DIR"


@dataclass(frozen=True)
class Settings:
    locale: str = DEFAULT_LOCALE
    translations_dir: Path | None = None

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        raw_dir = env.get(TRANSLATIONS_DIR_ENV, "").strip()
        return Settings(
            locale=env.get(LOCALE_ENV, "").strip() or DEFAULT_LOCALE,
            translations_dir=Path(raw_dir).expanduser() if raw_dir else None,
        )


def load_settings() -> Settings:
    return Settings.from_env()
