"""skillget resolve: show how a source would be fetched, without fetching it."""

from __future__ import annotations

import typer

from skillget.cli import ui
from skillget.cli._errors import report_errors
from skillget.core.sources import LocalSource, resolve_source


def resolve(
    source: str = typer.Argument(..., help="Local path, git URL, or GitHub shorthand"),
) -> None:
    """Classify an install source and print where it points."""
    with report_errors():
        resolved = resolve_source(source)

    ui.kv("Kind", resolved.kind.value)
    if isinstance(resolved, LocalSource):
        ui.kv("Path", str(resolved.path))
        if not resolved.path.exists():
            ui.warning("Path does not exist")
        return

    ui.kv("Repository", resolved.repo_url)
    ui.kv("Subpath", resolved.skill_subpath or "(repository root)")
