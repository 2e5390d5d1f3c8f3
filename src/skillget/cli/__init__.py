"""skillget CLI powered by Typer."""

import logging

import typer

from skillget.cli.config import config
from skillget.cli.install import install
from skillget.cli.list_skills import list_cmd
from skillget.cli.remove import remove
from skillget.cli.resolve import resolve

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    name="skillget",
    help="Install agent skills from local paths, git URLs and GitHub repositories.",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Install agent skills from local paths, git URLs and GitHub repositories."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


app.command()(install)
app.command("list")(list_cmd)
app.command()(remove)
app.command()(resolve)
app.command()(config)
