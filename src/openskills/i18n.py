"""Message lookup for the supported interface languages.

The language is resolved once per process and carried by a ``Translator``
instance; nothing here reads locale state after construction.
"""

from __future__ import annotations

import locale
import os
import re
from collections.abc import Mapping

from openskills.constants.config import DEFAULT_LANGUAGE, LANGUAGE_AUTO, LOCALE_ENV_VARS, SUPPORTED_LANGUAGES
from openskills.constants.messages import MESSAGES
from openskills.types import Language

_PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


class Translator:
    """Format messages for one language, falling back to English."""

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
        self._table = MESSAGES[self.language]
        self._fallback = MESSAGES[DEFAULT_LANGUAGE]

    def t(self, key: str, **params: object) -> str:
        """Return the message for *key* with ``{name}`` placeholders filled."""
        template = self._table.get(key) or self._fallback.get(key) or key
        if not params:
            return template

        def _fill(match: re.Match[str]) -> str:
            value = params.get(match.group(1))
            return match.group(0) if value is None else str(value)

        return _PLACEHOLDER_PATTERN.sub(_fill, template)


def resolve_language(setting: str | None, environ: Mapping[str, str] | None = None) -> Language:
    """Turn an explicit setting or ``auto`` into a supported language code."""
    if setting and setting != LANGUAGE_AUTO:
        return setting if setting in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
    return detect_language(os.environ if environ is None else environ)


def detect_language(environ: Mapping[str, str]) -> Language:
    """Detect the interface language from locale environment variables."""
    for name in LOCALE_ENV_VARS:
        value = environ.get(name)
        if value:
            return _language_from_tag(value)

    try:
        system_locale, _ = locale.getlocale()
    except ValueError:
        system_locale = None
    if system_locale:
        return _language_from_tag(system_locale)
    return DEFAULT_LANGUAGE


def _language_from_tag(tag: str) -> Language:
    # "zh_CN.UTF-8", "zh-Hans", "en_US"
    code = re.split(r"[_.\-:@]", tag, maxsplit=1)[0].lower()
    return "zh" if code.startswith("zh") else DEFAULT_LANGUAGE
