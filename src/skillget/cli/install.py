"""skillget install: fetch a skill and copy it into a skills directory."""

from __future__ import annotations

from typing import Optional

import typer

from skillget.cli import ui
from skillget.cli._errors import report_errors
from skillget.core.config import GlobalConfig
from skillget.core.installer import get_skills_dir, install_from_source
from skillget.core.sources import describe_source, resolve_source


def install(
    source: str = typer.Argument(
        ..., help="Local path, git URL, or GitHub shorthand (owner/repo[/path])"
    ),
    project: bool = typer.Option(
        False, "--project", "-p", help="Install into the project skills directory"
    ),
    directory: Optional[str] = typer.Option(
        None, "--dir", "-d", help="Install into this directory instead"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing skills"),
) -> None:
    """Install skills from a local path, git URL or GitHub repository.

    Examples:
      skillget install anthropics/skills/document-skills/pdf
      skillget install git@github.com:owner/repo.git
      skillget install ./my-skill --project
    """
    with report_errors():
        config = GlobalConfig.load()
        skills_dir = get_skills_dir(config, project=project, directory=directory)
        resolved = resolve_source(source)

        ui.step(f"Installing from {describe_source(resolved)}")
        with ui.spinner("Fetching skills"):
            installed = install_from_source(
                resolved, skills_dir, force=force, config=config
            )

    for skill in installed:
        ui.success(f"Installed {skill.name}")
    ui.kv("Location", str(skills_dir))
