"""Consumer loop — asks the front problem until it is answered correctly.

A wrong answer leaves the problem at the front, so it is asked again. An
empty queue ends the session early for both loops.
"""

from __future__ import annotations

import logging

from rich.console import Console

from mathrush.answers import AnswerReader, parse_answer
from mathrush.models import Expression, SessionStats
from mathrush.timing import Deadline, StopSignal
from mathrush.work_queue import ConcurrentQueue

logger = logging.getLogger(__name__)


def run_consumer(
    queue: ConcurrentQueue[Expression],
    deadline: Deadline,
    stop: StopSignal,
    answers: AnswerReader,
    console: Console,
) -> SessionStats:
    """Run the question/answer loop and return the accumulated stats."""
    stats = SessionStats()
    while not stop.is_set() and not deadline.expired():
        expression = queue.peek()
        if expression is None:
            logger.debug("Queue drained, stopping session")
            stop.set()
            break

        console.print(f"{expression.display()}: ", end="")
        try:
            text = answers.read(timeout=deadline.remaining())
        except EOFError:
            console.print()
            logger.debug("No more answers, waiting for the deadline")
            stop.wait(deadline.remaining())
            break
        if text is None:
            # Deadline passed while waiting for an answer
            console.print()
            break

        answer = parse_answer(text)
        if answer is None:
            console.print("[yellow]Invalid input. Enter a number[/yellow]")
            continue

        if answer != expression.evaluate():
            console.print("[red]Incorrect[/red]")
            stats.record(False)
            continue

        console.print("[green]Correct answer[/green]")
        stats.record(True)
        queue.dequeue()
    return stats
