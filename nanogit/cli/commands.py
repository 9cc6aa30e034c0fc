"""CLI commands for nanogit."""

import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from nanogit import __logo__, __version__
from nanogit.config.loader import load_config
from nanogit.config.schema import Config
from nanogit.errors import NanogitError
from nanogit.cli.session import Session

app = typer.Typer(
    name="nanogit",
    help=f"{__logo__} nanogit - a tiny in-memory version-control model",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} nanogit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True
    ),
):
    """nanogit - a tiny in-memory version-control model."""
    pass


def _setup(config_path: Path | None, verbose: bool) -> Config:
    """Load configuration and route loguru output to stderr."""
    try:
        config = load_config(config_path)
    except NanogitError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else config.logging.level)
    return config


# ============================================================================
# Shell / Script
# ============================================================================


@app.command()
def shell(
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Start an interactive session on a fresh repository."""
    session = Session(_setup(config_path, verbose))

    console.print(f"{__logo__} nanogit shell (type 'help' for commands, Ctrl+D to exit)\n")

    while not session.finished:
        try:
            line = console.input(f"[bold blue]({session.repo.current_branch})[/bold blue] ")
        except (EOFError, KeyboardInterrupt):
            console.print("\nGoodbye!")
            break

        try:
            output = session.execute(line)
        except NanogitError as e:
            console.print(f"[red]Error: {e}[/red]")
            continue

        if output:
            console.print(output, markup=False, highlight=False)


@app.command()
def run(
    script: Path = typer.Argument(..., help="File with one command per line"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Run a script of commands against a fresh repository."""
    session = Session(_setup(config_path, verbose))

    if not script.exists():
        console.print(f"[red]Script not found: {script}[/red]")
        raise typer.Exit(1)

    lines = script.read_text(encoding="utf-8").splitlines()
    for lineno, line in enumerate(lines, start=1):
        try:
            output = session.execute(line)
        except NanogitError as e:
            console.print(f"[red]{script}:{lineno}: {e}[/red]")
            raise typer.Exit(1)

        if output:
            console.print(output, markup=False, highlight=False)
        if session.finished:
            break


if __name__ == "__main__":
    app()
