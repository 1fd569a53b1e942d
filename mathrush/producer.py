"""Producer loop — adds a new problem to the queue on a fixed cadence.

Ticks fall on whole multiples of the cadence measured from session start
(3 s, 6 s, 9 s, ...). The loop sleeps on the stop signal between ticks, so a
stop wakes it at once. A tick that was overslept is skipped, not replayed.
"""

from __future__ import annotations

import logging
from typing import Callable

from mathrush.config import DEFAULT_CADENCE_S
from mathrush.models import Expression
from mathrush.timing import Deadline, StopSignal
from mathrush.work_queue import ConcurrentQueue

logger = logging.getLogger(__name__)


def run_producer(
    queue: ConcurrentQueue[Expression],
    deadline: Deadline,
    stop: StopSignal,
    make_expression: Callable[[], Expression],
    event_log: logging.Logger,
    cadence_s: float = DEFAULT_CADENCE_S,
) -> int:
    """Enqueue one expression per cadence tick until the deadline or a stop.

    Returns:
        Number of expressions enqueued.
    """
    produced = 0
    next_tick = cadence_s
    while not stop.is_set() and next_tick < deadline.duration_s:
        delay = next_tick - deadline.elapsed()
        if delay > 0 and stop.wait(delay):
            break
        elapsed = deadline.elapsed()
        if elapsed >= deadline.duration_s:
            break

        event_log.info(f"Enqueueing expression at {elapsed:.1f} seconds")
        queue.enqueue(make_expression())
        produced += 1
        pending = [e.display() for e in queue.snapshot()]
        logger.debug(f"Produced #{produced}, pending: {pending}")

        while next_tick <= elapsed:
            next_tick += cadence_s
    return produced
