"""Classify install sources and derive clone URLs."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

from openskills.constants.sources import (
    BRANCH_INDICATORS,
    GIT_URL_PREFIXES,
    GIT_URL_SUFFIX,
    HOME_PREFIX,
    HOSTED_GIT_HOST,
    HOSTED_GIT_URL_PREFIX,
    LOCAL_PATH_PREFIXES,
    SHORTHAND_SEPARATOR,
)
from openskills.exceptions import InvalidSourceFormatError
from openskills.model import GitSource, LocalSource, NormalizedUrl, ShorthandSource, SourceReference


def is_local_path(value: str) -> bool:
    """Return True for absolute, ``./``, ``../`` and ``~/`` paths."""
    return value.startswith(LOCAL_PATH_PREFIXES)


def is_git_url(value: str) -> bool:
    """Return True for SSH, git:// and HTTP(S) URLs or anything ending in ``.git``."""
    return value.startswith(GIT_URL_PREFIXES) or value.endswith(GIT_URL_SUFFIX)


def classify_source(value: str, *, cwd: Path, home: Path) -> SourceReference:
    """Turn the ``install`` argument into a source reference."""
    if is_local_path(value):
        return LocalSource(path=expand_local_path(value, cwd=cwd, home=home))

    if is_git_url(value):
        normalized = normalize_hosted_git_url(value)
        return GitSource(
            url=value,
            repo_url=normalized.repo_url,
            subpath=normalized.subpath,
            suggested=normalized.suggested,
        )

    return parse_shorthand(value)


def parse_shorthand(value: str) -> ShorthandSource:
    """Parse ``owner/repo`` or ``owner/repo/sub/path``."""
    parts = value.split(SHORTHAND_SEPARATOR)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise InvalidSourceFormatError(f"Invalid source format: {value!r}")

    subpath = SHORTHAND_SEPARATOR.join(parts[2:]).strip(SHORTHAND_SEPARATOR)
    return ShorthandSource(owner=parts[0], repo_name=parts[1], subpath=subpath)


def normalize_hosted_git_url(url: str) -> NormalizedUrl:
    """Reduce a browser URL on the hosted git service to its clone URL.

    ``https://github.com/o/r/tree/main/skills/pdf`` becomes
    ``https://github.com/o/r`` with ``main/skills/pdf`` reported as the
    subpath.  Other hosts, and URLs without an ``owner/repo`` path, are
    returned unchanged.
    """
    unchanged = NormalizedUrl(repo_url=url, suggested=url)
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return unchanged
    if hostname is None or hostname.lower() != HOSTED_GIT_HOST:
        return unchanged

    parts = [part for part in parsed.path.split("/") if part]
    if len(parts) < 2:
        return unchanged

    owner = parts[0]
    repo_name = parts[1].removesuffix(GIT_URL_SUFFIX)
    rest = parts[2:]
    if rest and rest[0] in BRANCH_INDICATORS:
        rest = rest[1:]
    subpath = SHORTHAND_SEPARATOR.join(rest)

    shorthand = f"{owner}/{repo_name}"
    return NormalizedUrl(
        repo_url=f"{HOSTED_GIT_URL_PREFIX}{shorthand}",
        suggested=f"{shorthand}/{subpath}" if subpath else shorthand,
        subpath=subpath,
    )


def expand_local_path(value: str, *, cwd: Path, home: Path) -> Path:
    """Resolve ``~/`` against *home* and everything else against *cwd*."""
    if value.startswith(HOME_PREFIX):
        return (home / value[len(HOME_PREFIX) :]).resolve()
    return (cwd / value).resolve()
