"""Tests for install source classification and URL normalization."""

from __future__ import annotations

from pathlib import Path

import pytest

from openskills.exceptions import InvalidSourceFormatError
from openskills.model import GitSource, LocalSource, ShorthandSource
from openskills.sources import classify_source, expand_local_path, normalize_hosted_git_url

CWD = Path("/work/project")
HOME = Path("/home/dev")


@pytest.mark.parametrize(
    "value",
    ["/abs/skills", "./skills", "../shared/skills", "~/skills"],
    ids=["absolute", "dot", "dotdot", "home"],
)
def test_local_paths_are_classified_local(value: str) -> None:
    assert isinstance(classify_source(value, cwd=CWD, home=HOME), LocalSource)


def test_home_path_expands_against_home() -> None:
    assert expand_local_path("~/skills/pdf", cwd=CWD, home=HOME) == HOME.resolve() / "skills" / "pdf"


def test_relative_path_expands_against_cwd() -> None:
    assert expand_local_path("./skills", cwd=CWD, home=HOME) == CWD.resolve() / "skills"


@pytest.mark.parametrize(
    "value",
    [
        "git@github.com:owner/repo.git",
        "git://example.com/owner/repo",
        "http://example.com/owner/repo",
        "https://gitlab.com/owner/repo",
        "owner/repo.git",
    ],
    ids=["ssh", "git-protocol", "http", "https", "dot-git-suffix"],
)
def test_git_urls_are_classified_git(value: str) -> None:
    source = classify_source(value, cwd=CWD, home=HOME)

    assert isinstance(source, GitSource)
    assert source.kind == "git"


@pytest.mark.parametrize(
    "value",
    ["anthropics/skills", "owner/repo", "a/b"],
)
def test_two_segment_shorthand_clone_url(value: str) -> None:
    source = classify_source(value, cwd=CWD, home=HOME)

    assert isinstance(source, ShorthandSource)
    assert source.clone_url == "https://github.com/" + value
    assert source.subpath == ""


def test_shorthand_with_subpath() -> None:
    source = classify_source("anthropics/skills/document-skills/pdf", cwd=CWD, home=HOME)

    assert source == ShorthandSource(owner="anthropics", repo_name="skills", subpath="document-skills/pdf")
    assert source.clone_url == "https://github.com/anthropics/skills"


@pytest.mark.parametrize("value", ["justaname", "", "owner/", "owner//skill"])
def test_invalid_shorthand_raises(value: str) -> None:
    with pytest.raises(InvalidSourceFormatError):
        classify_source(value, cwd=CWD, home=HOME)


@pytest.mark.parametrize(
    ("url", "repo_url", "suggested", "subpath"),
    [
        pytest.param(
            "https://github.com/owner/repo",
            "https://github.com/owner/repo",
            "owner/repo",
            "",
            id="plain",
        ),
        pytest.param(
            "https://github.com/owner/repo.git",
            "https://github.com/owner/repo",
            "owner/repo",
            "",
            id="dot-git",
        ),
        pytest.param(
            "https://github.com/owner/repo/tree/main",
            "https://github.com/owner/repo",
            "owner/repo/main",
            "main",
            id="tree",
        ),
        pytest.param(
            "https://github.com/owner/repo/blob/main/skills/pdf",
            "https://github.com/owner/repo",
            "owner/repo/main/skills/pdf",
            "main/skills/pdf",
            id="blob-with-path",
        ),
        pytest.param(
            "https://github.com/owner/repo/commit/abc123",
            "https://github.com/owner/repo",
            "owner/repo/abc123",
            "abc123",
            id="commit",
        ),
        pytest.param(
            "https://github.com/owner/repo/skills/pdf",
            "https://github.com/owner/repo",
            "owner/repo/skills/pdf",
            "skills/pdf",
            id="bare-subpath",
        ),
    ],
)
def test_normalize_hosted_git_url(url: str, repo_url: str, suggested: str, subpath: str) -> None:
    normalized = normalize_hosted_git_url(url)

    assert normalized.repo_url == repo_url
    assert normalized.suggested == suggested
    assert normalized.subpath == subpath


@pytest.mark.parametrize(
    "url",
    [
        "https://gitlab.com/owner/repo/tree/main",
        "git@github.com:owner/repo.git",
        "https://github.com/owner",
    ],
    ids=["other-host", "scp-style", "no-repo"],
)
def test_normalize_leaves_other_urls_unchanged(url: str) -> None:
    normalized = normalize_hosted_git_url(url)

    assert normalized.repo_url == url
    assert normalized.subpath == ""


def test_git_source_reports_normalization() -> None:
    source = classify_source("https://github.com/owner/repo/tree/main/skills", cwd=CWD, home=HOME)

    assert isinstance(source, GitSource)
    assert source.normalized is True
    assert source.repo_url == "https://github.com/owner/repo"
    assert source.suggested == "owner/repo/main/skills"


def test_clean_git_url_is_not_normalized() -> None:
    source = classify_source("https://github.com/owner/repo", cwd=CWD, home=HOME)

    assert isinstance(source, GitSource)
    assert source.normalized is False
