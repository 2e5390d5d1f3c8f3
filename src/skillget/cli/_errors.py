"""Translate skillget errors into CLI messages and exit codes."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer

from skillget.cli import ui
from skillget.core.errors import SkillgetError, UnsafePathError

EXIT_FAILURE = 1
EXIT_UNSAFE_PATH = 3


@contextmanager
def report_errors() -> Iterator[None]:
    try:
        yield
    except UnsafePathError as exc:
        ui.security_error(str(exc))
        ui.error("Aborted; nothing was written.")
        raise typer.Exit(EXIT_UNSAFE_PATH) from exc
    except SkillgetError as exc:
        ui.error(str(exc))
        raise typer.Exit(EXIT_FAILURE) from exc
