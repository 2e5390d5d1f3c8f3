"""skillget config: view and set global configuration."""

from __future__ import annotations

from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from skillget.cli import ui
from skillget.core.config import GlobalConfig


def config(
    key: Optional[str] = typer.Argument(None, help="Config key (e.g. install.global_dir)"),
    value: Optional[str] = typer.Argument(None, help="Value to set"),
) -> None:
    """View or set global skillget configuration.

    Examples:
      skillget config                                  # show current config
      skillget config install.global_dir ~/agent-skills
      skillget config git.timeout 300
    """
    cfg = GlobalConfig.load()

    # No arguments: print current config
    if key is None:
        data = cfg.model_dump()
        typer.echo(yaml.dump(data, default_flow_style=False, sort_keys=False).rstrip())
        return

    # Key without value: print that specific value
    if value is None:
        current = _get_nested(cfg.model_dump(), key)
        if current is None:
            ui.error(f"Unknown key: {key}")
            raise typer.Exit(1)
        typer.echo(current)
        return

    data = cfg.model_dump()
    if not _set_nested(data, key, value):
        ui.error(f"Unknown key: {key}")
        raise typer.Exit(1)

    try:
        cfg = GlobalConfig.model_validate(data)
    except ValidationError as exc:
        ui.error(f"Invalid value for {key}: {exc.errors()[0]['msg']}")
        raise typer.Exit(1) from exc

    cfg.save()
    typer.echo(f"  {key} = {value}")


def _get_nested(data: dict, dotted_key: str) -> Any:
    """Retrieve a value from a nested dict using a dotted key."""
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def _set_nested(data: dict, dotted_key: str, value: str) -> bool:
    """Set a leaf value in a nested dict, refusing unknown keys."""
    parts = dotted_key.split(".")
    current: Any = data
    for part in parts[:-1]:
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    field = parts[-1]
    if not isinstance(current, dict) or field not in current or isinstance(current[field], dict):
        return False
    current[field] = value
    return True
