"""skillget remove: delete an installed skill."""

from __future__ import annotations

from typing import Optional

import typer

from skillget.cli import ui
from skillget.cli._errors import report_errors
from skillget.core.installer import get_skills_dir, remove_skill


def remove(
    name: str = typer.Argument(..., help="Name of the installed skill"),
    project: bool = typer.Option(
        False, "--project", "-p", help="Remove from the project skills directory"
    ),
    directory: Optional[str] = typer.Option(None, "--dir", "-d", help="Skills directory"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Delete an installed skill."""
    with report_errors():
        skills_dir = get_skills_dir(project=project, directory=directory)

        if not force:
            confirm = typer.confirm(f"Remove skill '{name}' from {skills_dir}?")
            if not confirm:
                typer.echo("Aborted.")
                raise typer.Exit(0)

        removed = remove_skill(name, skills_dir)
    ui.success(f"Removed {removed.name}")
