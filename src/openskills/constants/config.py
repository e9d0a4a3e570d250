"""Configuration defaults and filenames."""

from __future__ import annotations

from openskills.types import Language

CONFIG_FILENAME: str = "openskills.yaml"

LANGUAGE_AUTO: str = "auto"
SUPPORTED_LANGUAGES: frozenset[str] = frozenset({"en", "zh"})
VALID_LANGUAGE_SETTINGS: frozenset[str] = SUPPORTED_LANGUAGES | {LANGUAGE_AUTO}
DEFAULT_LANGUAGE: Language = "en"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"language", "universal", "sync_output", "color"})

LOCALE_ENV_VARS: tuple[str, ...] = ("LANG", "LANGUAGE", "LC_ALL", "LC_MESSAGES", "LOCALE")

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_CONFIG_ERROR: int = 2
EXIT_CANCELLED: int = 130
