"""Core data models for OpenSkills."""

from .entities import (
    GitSource,
    InstallOutcome,
    LocalSource,
    NormalizedUrl,
    SectionMatch,
    ShorthandSource,
    Skill,
    SkillCandidate,
    SkillRoot,
    SourceReference,
)

__all__ = [
    "GitSource",
    "InstallOutcome",
    "LocalSource",
    "NormalizedUrl",
    "SectionMatch",
    "ShorthandSource",
    "Skill",
    "SkillCandidate",
    "SkillRoot",
    "SourceReference",
]
