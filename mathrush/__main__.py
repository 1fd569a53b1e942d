"""CLI for the mathrush timed arithmetic quiz.

Usage:
    python -m mathrush <duration> <difficulty>         # Play a session
    python -m mathrush 60 2 --seed 7                   # Reproducible problems
    python -m mathrush 30 1 --log-file /tmp/log.txt    # Custom event log
    python -m mathrush --help
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mathrush.config import EXIT_LOG_FILE, EXIT_OK, EXIT_USAGE, ConfigError, build_config
from mathrush.event_log import close_event_log, open_event_log
from mathrush.report import render_report
from mathrush.runner import run_session

app = typer.Typer(
    name="mathrush",
    help="Timed arithmetic quiz",
    add_completion=False,
)
console = Console(highlight=False)
err_console = Console(stderr=True)


def _usage_error() -> typer.Exit:
    err_console.print("Usage: mathrush <duration> <difficulty>")
    err_console.print("For more help, run mathrush --help")
    return typer.Exit(EXIT_USAGE)


def _enable_debug_logging() -> None:
    """Send mathrush diagnostics to stderr through Rich."""
    logger = logging.getLogger("mathrush")
    logger.setLevel(logging.DEBUG)
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return
    logger.addHandler(RichHandler(console=err_console, show_path=False))


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    duration: Optional[str] = typer.Argument(None, help="The duration of the game in seconds", show_default=False),
    difficulty: Optional[str] = typer.Argument(None, help="1 (easy) / 2 (medium) / 3 (hard)", show_default=False),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", envvar="MATHRUSH_LOG_FILE", help="Event log path [default: ./log.txt]",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", envvar="MATHRUSH_SEED", help="Seed for reproducible problems"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug diagnostics to stderr"),
) -> None:
    """Answer arithmetic problems before the queue outgrows you.

    A new problem is added every 3 seconds. Answer the one shown; a correct
    answer moves on to the next, a wrong one asks it again. The game ends when
    time is up or every problem has been answered.

    The greater the difficulty, the greater the range of numbers.

    Example: mathrush 60 2 starts a 60 second game on medium.
    """
    if duration is None or difficulty is None or ctx.args:
        raise _usage_error()

    try:
        config = build_config(duration, difficulty, log_path=log_file, seed=seed)
    except ConfigError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(e.exit_code)

    if verbose:
        _enable_debug_logging()

    try:
        event_log = open_event_log(config.log_path)
    except OSError as e:
        err_console.print("[red]Error: Unable to create log file[/red]")
        err_console.print(f"  [dim]{escape(str(e))}[/dim]")
        raise typer.Exit(EXIT_LOG_FILE)

    try:
        result = run_session(config, console, event_log)
    finally:
        close_event_log(event_log)
    render_report(result, console)
    raise typer.Exit(EXIT_OK)


if __name__ == "__main__":
    app()
