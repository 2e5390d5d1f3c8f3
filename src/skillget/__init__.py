"""skillget: resolve install sources and install agent skills safely."""

from skillget.core.errors import (
    FetchError,
    InvalidSourceError,
    SkillExistsError,
    SkillgetError,
    SkillNotFoundError,
    UnresolvableHomeError,
    UnsafePathError,
)
from skillget.core.installer import install_from_source, list_installed, remove_skill
from skillget.core.paths import expand, is_path_safe
from skillget.core.sources import SourceKind, classify, parse_shorthand, resolve_source

__all__ = [
    "classify",
    "parse_shorthand",
    "expand",
    "is_path_safe",
    "resolve_source",
    "install_from_source",
    "list_installed",
    "remove_skill",
    "SourceKind",
    "SkillgetError",
    "UnresolvableHomeError",
    "InvalidSourceError",
    "UnsafePathError",
    "FetchError",
    "SkillNotFoundError",
    "SkillExistsError",
]
