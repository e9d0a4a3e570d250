"""Constants for classifying and normalizing install sources."""

from __future__ import annotations

LOCAL_PATH_PREFIXES: tuple[str, ...] = ("/", "./", "../", "~/")
HOME_PREFIX: str = "~/"

GIT_URL_PREFIXES: tuple[str, ...] = ("git@", "git://", "http://", "https://")
GIT_URL_SUFFIX: str = ".git"

HOSTED_GIT_HOST: str = "github.com"
HOSTED_GIT_URL_PREFIX: str = "https://github.com/"
BRANCH_INDICATORS: frozenset[str] = frozenset({"tree", "blob", "commit"})

SHORTHAND_SEPARATOR: str = "/"

# Substrings of git stderr that mean the repository does not exist.
CLONE_NOT_FOUND_MARKERS: tuple[str, ...] = ("not found", "does not exist")
