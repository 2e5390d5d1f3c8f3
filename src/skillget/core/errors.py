"""Exceptions raised while resolving and installing skills."""

from __future__ import annotations


class SkillgetError(Exception):
    """Base class for every error skillget reports to the user."""


class UnresolvableHomeError(SkillgetError):
    """The current user's home directory could not be determined."""


class InvalidSourceError(SkillgetError, ValueError):
    """The install source is not a usable path, git URL or GitHub shorthand."""


class UnsafePathError(SkillgetError):
    """A write target escapes the directory it must stay inside."""

    def __init__(self, target: object, base: object) -> None:
        self.target = target
        self.base = base
        super().__init__(f"Refusing to write outside {base}: {target}")


class FetchError(SkillgetError):
    """Cloning a remote repository failed."""


class SkillNotFoundError(SkillgetError, FileNotFoundError):
    """No skill was found where one was expected."""


class SkillExistsError(SkillgetError, FileExistsError):
    """A skill with the same name is already installed."""
