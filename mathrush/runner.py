"""Session runner — wires the queue, producer and consumer together.

Data flow per session:
1. Seed the queue with one expression
2. Start the shared Deadline and StopSignal
3. Run producer and consumer on two worker threads
4. Wait for both, then report stats and how many problems were left
"""

from __future__ import annotations

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from rich.console import Console

from mathrush.answers import AnswerReader
from mathrush.config import QuizConfig
from mathrush.consumer import run_consumer
from mathrush.generator import ExpressionGenerator
from mathrush.models import Expression, SessionResult
from mathrush.producer import run_producer
from mathrush.timing import Deadline, StopSignal
from mathrush.work_queue import ConcurrentQueue

logger = logging.getLogger(__name__)


def run_session(
    config: QuizConfig,
    console: Console,
    event_log: logging.Logger,
    answers: Optional[AnswerReader] = None,
) -> SessionResult:
    """Play one timed session.

    Args:
        config: Validated session settings.
        console: Where prompts and feedback are printed.
        event_log: Receives one line per producer enqueue.
        answers: Answer source. Defaults to a reader over stdin.

    Returns:
        SessionResult with final stats and the number of unanswered problems.
    """
    answers = answers or AnswerReader(sys.stdin)
    make_expression = ExpressionGenerator(config.difficulty, seed=config.seed)

    queue: ConcurrentQueue[Expression] = ConcurrentQueue()
    queue.enqueue(make_expression())

    stop = StopSignal()
    deadline = Deadline(config.duration_s)
    logger.debug(
        f"Session start: {config.duration_s}s, difficulty {config.difficulty.name.lower()}, "
        f"cadence {config.cadence_s}s"
    )

    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="mathrush") as pool:
        producer = pool.submit(
            run_producer, queue, deadline, stop, make_expression, event_log, config.cadence_s,
        )
        consumer = pool.submit(run_consumer, queue, deadline, stop, answers, console)
        try:
            stats = consumer.result()
        finally:
            # Let the producer exit even if the consumer failed
            stop.set()
        produced = producer.result()

    result = SessionResult(stats=stats, remaining=queue.size(), elapsed_s=deadline.elapsed())
    logger.debug(f"Session end: produced {produced}, {result.to_dict()}")
    return result
