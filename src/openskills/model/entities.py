"""Frozen dataclasses for skills, install sources and install results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias

from openskills.constants.sources import HOSTED_GIT_URL_PREFIX
from openskills.types import InstallStatus, SkillLocation


@dataclass(frozen=True)
class SkillRoot:
    """A well-known directory that holds installed skills."""

    path: Path
    location: SkillLocation
    universal: bool
    label: str


@dataclass(frozen=True)
class Skill:
    """An installed skill discovered under one of the skill roots."""

    name: str
    description: str
    path: Path
    base_dir: Path
    source: Path
    location: SkillLocation


@dataclass(frozen=True)
class SkillCandidate:
    """A skill directory found in an install source, ready to be copied."""

    name: str
    description: str
    skill_dir: Path
    size_bytes: int


@dataclass(frozen=True)
class LocalSource:
    """Install source pointing at a directory on disk."""

    path: Path
    kind: Literal["local"] = "local"


@dataclass(frozen=True)
class GitSource:
    """Install source given as a full git URL.

    ``repo_url`` is the URL that gets cloned; for hosted URLs it is the
    normalized ``https://github.com/<owner>/<repo>`` form.  ``suggested``
    holds the equivalent shorthand when normalization applied.
    """

    url: str
    repo_url: str
    subpath: str = ""
    suggested: str = ""
    kind: Literal["git"] = "git"

    @property
    def normalized(self) -> bool:
        """Whether ``repo_url`` differs from the URL that was typed."""
        return self.repo_url != self.url


@dataclass(frozen=True)
class ShorthandSource:
    """Install source given as ``owner/repo[/subpath]``."""

    owner: str
    repo_name: str
    subpath: str = ""
    kind: Literal["shorthand"] = "shorthand"

    @property
    def clone_url(self) -> str:
        """Canonical clone URL on the hosted git service."""
        return f"{HOSTED_GIT_URL_PREFIX}{self.owner}/{self.repo_name}"


SourceReference: TypeAlias = LocalSource | GitSource | ShorthandSource


@dataclass(frozen=True)
class NormalizedUrl:
    """Result of normalizing a hosted git URL."""

    repo_url: str
    suggested: str
    subpath: str = ""


@dataclass(frozen=True)
class InstallOutcome:
    """Result of installing one skill directory."""

    name: str
    destination: Path
    status: InstallStatus
    overwritten: bool = False

    @property
    def installed(self) -> bool:
        """Whether files were copied."""
        return self.status == "installed"


@dataclass(frozen=True)
class SectionMatch:
    """Location of a generated skills section inside a markdown document."""

    start: int
    end: int
    legacy: bool

    def body(self, document: str) -> str:
        """Return the matched region including its markers."""
        return document[self.start : self.end]
