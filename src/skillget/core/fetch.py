"""Clone remote repositories with the git executable."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from skillget.core.errors import FetchError

logger = logging.getLogger(__name__)


def clone_repository(
    repo_url: str,
    dest: Path,
    *,
    timeout: int = 120,
    depth: int = 1,
) -> Path:
    """Shallow-clone *repo_url* into *dest* and return *dest*."""
    args = ["git", "clone", "--depth", str(depth), "--", repo_url, str(dest)]
    logger.info("Cloning %s into %s", repo_url, dest)
    try:
        result = subprocess.run(
            args, capture_output=True, text=True, check=False, timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise FetchError("git is not installed or not on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise FetchError(f"Timed out after {timeout}s cloning {repo_url}") from exc

    if result.returncode != 0:
        stderr = result.stderr.strip() or result.stdout.strip()
        logger.debug("git clone failed (%d): %s", result.returncode, stderr)
        raise FetchError(f"Failed to clone {repo_url}\n{stderr}")
    return dest
