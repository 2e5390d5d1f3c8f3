"""Install skills from a resolved source into a skills directory.

Every copy into and every removal from a skills directory goes through
``ensure_path_safe`` immediately beforehand.
"""

from __future__ import annotations

import functools
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import yaml

from skillget.core.config import GlobalConfig
from skillget.core.errors import (
    InvalidSourceError,
    SkillExistsError,
    SkillNotFoundError,
)
from skillget.core.fetch import clone_repository
from skillget.core.paths import HomeProvider, ensure_path_safe, expand
from skillget.core.sources import (
    LocalSource,
    ResolvedSource,
    repo_name_from_url,
    resolve_source,
)

logger = logging.getLogger(__name__)

SKILL_FILE = "SKILL.md"
IGNORED_DIRS = (".git",)

Fetcher = Callable[[str, Path], Any]


def is_plain_name(name: str) -> bool:
    """True for a single path segment other than `.` or `..`."""
    return name not in ("", ".", "..") and "/" not in name and "\\" not in name


@dataclass(frozen=True)
class InstalledSkill:
    name: str
    path: Path
    description: str | None = None


def get_skills_dir(
    config: GlobalConfig | None = None,
    *,
    project: bool = False,
    directory: str | None = None,
    home: HomeProvider | None = None,
    cwd: str | Path | None = None,
) -> Path:
    """Return the skills directory to operate on.

    An explicit *directory* wins, then the project directory, then the
    global one from the config.
    """
    config = config or GlobalConfig.load()
    if directory:
        chosen = directory
    elif project:
        chosen = config.install.project_dir
    else:
        chosen = config.install.global_dir
    return expand(chosen, home=home, cwd=cwd)


def read_skill_metadata(skill_dir: Path) -> dict[str, Any]:
    """Parse the YAML frontmatter of a skill's SKILL.md, if it has one."""
    skill_file = skill_dir / SKILL_FILE
    try:
        text = skill_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return {}

    if not text.startswith("---"):
        return {}
    parts = text.split("---", 2)
    if len(parts) < 3:
        return {}
    try:
        data = yaml.safe_load(parts[1])
    except yaml.YAMLError as exc:
        logger.debug("Invalid frontmatter in %s: %s", skill_file, exc)
        return {}
    return data if isinstance(data, dict) else {}


def discover_skills(root: Path) -> list[Path]:
    """Find skill directories (containing SKILL.md) at or below *root*."""
    if (root / SKILL_FILE).is_file():
        return [root]

    markers = sorted(root.rglob(SKILL_FILE), key=lambda p: (len(p.parts), p))
    found: list[Path] = []
    for marker in markers:
        if not marker.is_file():
            continue
        skill_dir = marker.parent
        relative = skill_dir.relative_to(root)
        if any(part in IGNORED_DIRS for part in relative.parts):
            continue
        # A skill's own subdirectories belong to it
        if any(skill_dir.is_relative_to(parent) for parent in found):
            continue
        found.append(skill_dir)
    return sorted(found)


def install_from_source(
    source: str | ResolvedSource,
    skills_dir: Path,
    *,
    force: bool = False,
    config: GlobalConfig | None = None,
    fetcher: Fetcher | None = None,
    home: HomeProvider | None = None,
    cwd: str | Path | None = None,
) -> list[InstalledSkill]:
    """Resolve *source*, fetch it if remote, and copy its skills into *skills_dir*.

    *source* may also be a location already returned by ``resolve_source``.
    """
    config = config or GlobalConfig()
    skills_dir = expand(str(skills_dir), home=home, cwd=cwd)
    if isinstance(source, str):
        resolved = resolve_source(source, home=home, cwd=cwd)
    else:
        resolved = source

    if isinstance(resolved, LocalSource):
        root = resolved.path
        if not root.is_dir():
            raise SkillNotFoundError(f"Source directory not found: {root}")
        return _install_skills(root, root.name, skills_dir, force=force)

    fetch = fetcher or functools.partial(
        clone_repository, timeout=config.git.timeout, depth=config.git.depth
    )
    with tempfile.TemporaryDirectory(prefix="skillget-") as tmp_dir:
        clone_dir = Path(tmp_dir) / "repo"
        fetch(resolved.repo_url, clone_dir)

        root = clone_dir
        if resolved.skill_subpath:
            root = Path(os.path.normpath(clone_dir / resolved.skill_subpath))
            ensure_path_safe(root, clone_dir)
            if not root.is_dir():
                raise SkillNotFoundError(
                    f"Skill path not found in repository: {resolved.skill_subpath}"
                )
            # The subpath may be a symlink inside the clone
            ensure_path_safe(root.resolve(), clone_dir.resolve())

        root_name = root.name if root != clone_dir else repo_name_from_url(resolved.repo_url)
        return _install_skills(root, root_name, skills_dir, force=force)


def _install_skills(
    root: Path, root_name: str, skills_dir: Path, *, force: bool
) -> list[InstalledSkill]:
    skill_dirs = discover_skills(root)
    if not skill_dirs:
        raise SkillNotFoundError(f"No {SKILL_FILE} found in {root}")

    plan: list[tuple[Path, Path]] = []
    for skill_dir in skill_dirs:
        name = root_name if skill_dir == root else skill_dir.name
        if not is_plain_name(name):
            raise InvalidSourceError(f"Cannot derive a skill name from {skill_dir}: {name!r}")
        target = skills_dir / name
        ensure_path_safe(target, skills_dir, strict=True)
        if (target.exists() or target.is_symlink()) and not force:
            raise SkillExistsError(f"Skill already exists: {target}")
        plan.append((skill_dir, target))

    skills_dir.mkdir(parents=True, exist_ok=True)
    installed: list[InstalledSkill] = []
    for skill_dir, target in plan:
        ensure_path_safe(target, skills_dir, strict=True)
        if target.is_symlink() or target.is_file():
            target.unlink()
        elif target.exists():
            shutil.rmtree(target)
        shutil.copytree(
            skill_dir,
            target,
            symlinks=True,
            ignore=shutil.ignore_patterns(*IGNORED_DIRS),
        )
        metadata = read_skill_metadata(target)
        logger.info("Installed skill '%s' into %s", target.name, target)
        installed.append(
            InstalledSkill(
                name=target.name,
                path=target,
                description=metadata.get("description"),
            )
        )
    return installed


def list_installed(skills_dir: Path) -> list[InstalledSkill]:
    """Return every skill directory directly inside *skills_dir*."""
    if not skills_dir.is_dir():
        return []

    results = []
    for entry in sorted(skills_dir.iterdir()):
        if not entry.is_dir() or not (entry / SKILL_FILE).is_file():
            continue
        metadata = read_skill_metadata(entry)
        results.append(
            InstalledSkill(
                name=entry.name,
                path=entry,
                description=metadata.get("description"),
            )
        )
    return results


def remove_skill(name: str, skills_dir: Path) -> Path:
    """Delete an installed skill and return the removed path."""
    if name in ("", ".") or "/" in name or "\\" in name:
        raise SkillNotFoundError(f"Not a skill name: {name!r}")

    target = skills_dir / name
    if not target.is_dir():
        raise SkillNotFoundError(f"Skill directory not found: {target}")

    ensure_path_safe(target, skills_dir, strict=True)
    if target.is_symlink():
        target.unlink()
    else:
        shutil.rmtree(target)
    logger.info("Removed skill '%s' from %s", name, skills_dir)
    return target
