"""Typer entry point for the gsw command."""

from pathlib import Path
from types import SimpleNamespace
from typing import Annotated, Optional

import typer

from . import __version__
from . import log as gsw_log
from .commands.scan import scan as scan_cmd

app = typer.Typer(
    add_completion=False,
    help="Find git repositories under a directory and report dirty branches.",
)


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in gsw_log.LEVEL_NAMES:
        raise typer.BadParameter(
            f"expected one of: {', '.join(gsw_log.LEVEL_NAMES)}", param_hint="--log-level"
        )
    return normalized


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gsw {__version__}")
        raise typer.Exit()


@app.command()
def main(
    directory: Annotated[
        Path,
        typer.Option("--dir", "-d", help="Directory to scan for git repositories."),
    ] = Path("."),
    show_clean: Annotated[
        bool,
        typer.Option("--show-clean", help="Show clean branches in addition to dirty ones."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print progress diagnostics to stderr."),
    ] = False,
    max_depth: Annotated[
        int,
        typer.Option("--max-depth", min=0, help="Maximum directory depth to search."),
    ] = 10,
    parallel: Annotated[
        bool,
        typer.Option("--parallel", "-p", help="Scan repositories on a worker pool."),
    ] = False,
    jobs: Annotated[
        Optional[int],
        typer.Option(
            "--jobs",
            "-j",
            min=1,
            help="Worker-pool size for --parallel (default: GSW_JOBS or CPU count, max 8).",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output JSON instead of text."),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=_validate_log_level,
            help="Diagnostic level: trace, debug, info, success, warning, error.",
        ),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colorized output."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Report uncommitted changes on every local branch of every repository."""
    del version
    if log_level is not None:
        gsw_log.set_level(log_level)
    elif verbose:
        gsw_log.set_level("debug")
    if no_color:
        gsw_log.set_no_color(True)
    scan_cmd(
        SimpleNamespace(
            dir=directory,
            show_clean=show_clean,
            verbose=verbose,
            max_depth=max_depth,
            parallel=parallel,
            jobs=jobs,
            json_output=json_output,
        )
    )


def run() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    run()
