"""skillget list: show installed skills."""

from __future__ import annotations

from typing import Optional

import typer

from skillget.cli import ui
from skillget.cli._errors import report_errors
from skillget.core.installer import get_skills_dir, list_installed


def list_cmd(
    project: bool = typer.Option(
        False, "--project", "-p", help="List the project skills directory"
    ),
    directory: Optional[str] = typer.Option(None, "--dir", "-d", help="List this directory"),
) -> None:
    """List installed skills."""
    with report_errors():
        skills_dir = get_skills_dir(project=project, directory=directory)
    skills = list_installed(skills_dir)

    if not skills:
        ui.info(f"No skills installed in {skills_dir}")
        return

    ui.header(f"Skills ({len(skills)})")
    ui.plain()
    rows = [(s.name, s.description or "", str(s.path)) for s in skills]
    ui.table(["Name", "Description", "Path"], rows)
