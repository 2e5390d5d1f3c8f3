"""Classify install sources and resolve them to a fetchable location."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Union

from skillget.core.errors import InvalidSourceError
from skillget.core.paths import HomeProvider, expand

logger = logging.getLogger(__name__)

GITHUB_BASE_URL = "https://github.com"

LOCAL_PATH_PREFIXES = ("/", "./", "../", "~/", ".\\", "..\\")
GIT_URL_PREFIXES = ("git@", "git://", "http://", "https://")
GIT_URL_SUFFIX = ".git"


class SourceKind(str, Enum):
    LOCAL_PATH = "local_path"
    GIT_URL = "git_url"
    GITHUB_SHORTHAND = "github_shorthand"


@dataclass(frozen=True)
class GitHubShorthand:
    repo_url: str
    skill_subpath: str = ""


@dataclass(frozen=True)
class LocalSource:
    path: Path

    @property
    def kind(self) -> SourceKind:
        return SourceKind.LOCAL_PATH


@dataclass(frozen=True)
class RemoteSource:
    kind: SourceKind
    repo_url: str
    skill_subpath: str = ""


ResolvedSource = Union[LocalSource, RemoteSource]


def is_local_path(source: str) -> bool:
    """Paths that start like a filesystem path, or are absolute on this platform."""
    return source.startswith(LOCAL_PATH_PREFIXES) or os.path.isabs(source)


def is_git_url(source: str) -> bool:
    return source.startswith(GIT_URL_PREFIXES) or source.endswith(GIT_URL_SUFFIX)


# Evaluated in order, first match wins.
CLASSIFICATION_RULES: tuple[tuple[Callable[[str], bool], SourceKind], ...] = (
    (is_local_path, SourceKind.LOCAL_PATH),
    (is_git_url, SourceKind.GIT_URL),
)


def classify(source: str) -> SourceKind:
    """Decide which kind of install source *source* is.

    Anything that is neither a local path nor a git URL is treated as
    GitHub shorthand; ``parse_shorthand`` rejects the ones without a slash.
    """
    for predicate, kind in CLASSIFICATION_RULES:
        if predicate(source):
            return kind
    return SourceKind.GITHUB_SHORTHAND


def parse_shorthand(source: str) -> GitHubShorthand | None:
    """Split ``owner/repo[/subpath]`` into a GitHub URL and a subpath.

    Returns None for a single segment with no slash.
    """
    parts = source.split("/")
    if len(parts) == 2:
        return GitHubShorthand(repo_url=f"{GITHUB_BASE_URL}/{source}")
    if len(parts) > 2:
        return GitHubShorthand(
            repo_url=f"{GITHUB_BASE_URL}/{parts[0]}/{parts[1]}",
            skill_subpath="/".join(parts[2:]),
        )
    return None


def resolve_source(
    source: str,
    *,
    home: HomeProvider | None = None,
    cwd: str | Path | None = None,
) -> ResolvedSource:
    """Classify *source* and turn it into a local path or a remote location."""
    source = source.strip()
    if not source:
        raise InvalidSourceError("Install source is empty")

    kind = classify(source)
    logger.debug("Classified %r as %s", source, kind.value)

    if kind is SourceKind.LOCAL_PATH:
        return LocalSource(expand(source, home=home, cwd=cwd))
    if kind is SourceKind.GIT_URL:
        return RemoteSource(kind=kind, repo_url=source)

    shorthand = parse_shorthand(source)
    if shorthand is None:
        raise InvalidSourceError(
            f"'{source}' is not a valid source. Use a local path, a git URL, "
            "or GitHub shorthand (owner/repo or owner/repo/path/to/skill)."
        )
    return RemoteSource(
        kind=kind,
        repo_url=shorthand.repo_url,
        skill_subpath=shorthand.skill_subpath,
    )


def repo_name_from_url(repo_url: str) -> str:
    """Return the repository name from an https, git:// or scp-style URL."""
    tail = repo_url.rstrip("/").rsplit("/", 1)[-1]
    tail = tail.rsplit(":", 1)[-1]
    return tail.removesuffix(GIT_URL_SUFFIX)


def describe_source(resolved: ResolvedSource) -> str:
    if isinstance(resolved, LocalSource):
        return f"local path {resolved.path}"
    label = "GitHub" if resolved.kind is SourceKind.GITHUB_SHORTHAND else "git"
    if resolved.skill_subpath:
        return f"{label} {resolved.repo_url} ({resolved.skill_subpath})"
    return f"{label} {resolved.repo_url}"
