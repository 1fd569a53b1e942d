"""End-of-session report."""

from __future__ import annotations

from rich.console import Console

from mathrush.models import SessionResult

DIVIDER = "=" * 38


def render_report(result: SessionResult, console: Console) -> None:
    """Print the final score block."""
    stats = result.stats
    console.print(DIVIDER)
    if result.drained:
        console.print("[bold green]Good job![/bold green]")
        console.print("You answered all the questions faster")
        console.print("than the game could generate them!")
    else:
        console.print("[bold]Time is up![/bold]")
    console.print(DIVIDER)
    console.print(f"Correct answers: {stats.correct}")
    console.print(f"Incorrect answers: {stats.incorrect}")
    console.print(f"Score: {stats.score}")
    console.print(DIVIDER)
