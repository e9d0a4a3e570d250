"""Config loading and validation for OpenSkills."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

import yaml

from openskills.config.model import OpenSkillsConfig
from openskills.constants.agents_md import MARKDOWN_SUFFIX
from openskills.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    LANGUAGE_AUTO,
    VALID_LANGUAGE_SETTINGS,
)
from openskills.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> OpenSkillsConfig:
    """Load config from ``openskills.yaml`` in *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return OpenSkillsConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            hint = _suggest_key(key, ALLOWED_CONFIG_KEYS)
            raise ConfigError(f"unknown key `{key}` in {path}" + (f" ({hint})" if hint else ""))

    language = raw.get("language", LANGUAGE_AUTO)
    if not isinstance(language, str) or language not in VALID_LANGUAGE_SETTINGS:
        raise ConfigError(f"language must be one of {sorted(VALID_LANGUAGE_SETTINGS)}, got {language!r}")

    universal = raw.get("universal", False)
    if not isinstance(universal, bool):
        raise ConfigError("universal must be a boolean")

    color = raw.get("color", True)
    if not isinstance(color, bool):
        raise ConfigError("color must be a boolean")

    sync_output = raw.get("sync_output")
    if sync_output is not None and (not isinstance(sync_output, str) or not sync_output.endswith(MARKDOWN_SUFFIX)):
        raise ConfigError("sync_output must be a path ending in .md")

    logger.debug("Loaded config from %s", path)
    return OpenSkillsConfig(
        language=language,
        universal=universal,
        sync_output=sync_output,
        color=color,
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
