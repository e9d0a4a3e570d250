"""Install source classification and fetching."""

from __future__ import annotations

from .git import cloned_repository, run_git_clone
from .locator import (
    classify_source,
    expand_local_path,
    is_git_url,
    is_local_path,
    normalize_hosted_git_url,
    parse_shorthand,
)

__all__ = [
    "classify_source",
    "cloned_repository",
    "expand_local_path",
    "is_git_url",
    "is_local_path",
    "normalize_hosted_git_url",
    "parse_shorthand",
    "run_git_clone",
]
