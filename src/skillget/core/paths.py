"""Central paths, home expansion and containment checks."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from skillget.core.errors import UnresolvableHomeError, UnsafePathError

logger = logging.getLogger(__name__)

SKILLGET_DIRNAME = ".skillget"
CONFIG_FILE = "config.yaml"

# Overrides the default ~/.skillget when set
SKILLGET_HOME: Path | None = None

HomeProvider = Callable[[], Path]


def default_home() -> Path:
    """Return the current user's home directory."""
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise UnresolvableHomeError(f"Could not determine home directory: {exc}") from exc


def get_skillget_home() -> Path:
    """Return the directory holding skillget's own config."""
    return SKILLGET_HOME or default_home() / SKILLGET_DIRNAME


def _absolute(path: str | Path, cwd: str | Path | None = None) -> str:
    """Lexically normalize *path* to an absolute path without touching disk."""
    base = os.fspath(cwd) if cwd is not None else os.getcwd()
    return os.path.normpath(os.path.join(base, os.fspath(path)))


def expand(
    source: str,
    *,
    home: HomeProvider | None = None,
    cwd: str | Path | None = None,
) -> Path:
    """Turn a user-supplied path into an absolute, normalized path.

    ``~/`` is replaced with the home directory returned by *home*
    (``default_home`` when omitted). Anything else is resolved against
    *cwd*. Symlinks are not followed and the path need not exist.
    """
    if source.startswith("~/"):
        raw_home = (home or default_home)()
        if not raw_home or not Path(raw_home).is_absolute():
            raise UnresolvableHomeError(f"Home directory is not an absolute path: {raw_home!r}")
        home_dir = Path(raw_home)
        return Path(_absolute(source[2:].lstrip("/\\"), home_dir))
    return Path(_absolute(source, cwd))


def is_path_safe(
    target: str | Path,
    base: str | Path,
    *,
    cwd: str | Path | None = None,
) -> bool:
    """Return True if *target* is *base* itself or lies somewhere below it.

    Both paths are normalized first, then compared segment by segment, so
    ``/a/skills-evil`` is not inside ``/a/skills``.
    """
    resolved_target = _absolute(target, cwd)
    resolved_base = _absolute(base, cwd)
    try:
        relative = os.path.relpath(resolved_target, resolved_base)
    except ValueError:
        # Different drives on Windows
        return False
    if os.path.isabs(relative):
        return False
    first = Path(relative).parts[0] if relative != os.curdir else os.curdir
    return first != os.pardir


def ensure_path_safe(
    target: str | Path,
    base: str | Path,
    *,
    cwd: str | Path | None = None,
    strict: bool = False,
) -> None:
    """Raise UnsafePathError unless *target* stays inside *base*.

    With *strict*, *target* must be below *base*, not *base* itself.
    """
    unsafe = not is_path_safe(target, base, cwd=cwd)
    if strict and _absolute(target, cwd) == _absolute(base, cwd):
        unsafe = True
    if unsafe:
        logger.warning("Blocked path outside %s: %s", base, target)
        raise UnsafePathError(target, base)
