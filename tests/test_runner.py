"""Tests for the session runner coordinating producer and consumer threads."""

import io
import time

from mathrush.answers import AnswerReader
from mathrush.config import QuizConfig
from mathrush.generator import ExpressionGenerator
from mathrush.models import Difficulty, SessionResult, SessionStats
from mathrush.report import render_report
from mathrush.runner import run_session


def _config(tmp_path, **overrides):
    values = dict(
        duration_s=0.6,
        difficulty=Difficulty.EASY,
        log_path=tmp_path / "log.txt",
        cadence_s=0.2,
        seed=11,
    )
    values.update(overrides)
    return QuizConfig(**values)


def test_idle_session_runs_to_deadline(tmp_path, console, event_log):
    logger, path = event_log
    start = time.monotonic()
    result = run_session(_config(tmp_path), console, logger, AnswerReader(io.StringIO("")))

    assert time.monotonic() - start >= 0.5
    assert result.stats.total == 0
    # Seed expression plus whatever the producer added
    assert result.remaining >= 1
    assert not result.drained
    assert result.remaining == 1 + len(path.read_text(encoding="utf-8").splitlines())


def test_answering_everything_drains_early(tmp_path, console, event_log):
    logger, _ = event_log
    config = _config(tmp_path, duration_s=5, cadence_s=100)
    first = ExpressionGenerator(config.difficulty, seed=config.seed)()
    answers = AnswerReader(io.StringIO(f"{first.evaluate()}\n"))

    start = time.monotonic()
    result = run_session(config, console, logger, answers)

    assert time.monotonic() - start < 4
    assert result.drained
    assert (result.stats.correct, result.stats.incorrect) == (1, 0)
    assert first.display() in console.file.getvalue()


# --- Report ---

def test_report_for_drained_session(console):
    render_report(SessionResult(stats=SessionStats(4, 1), remaining=0), console)
    out = console.file.getvalue()
    assert "Good job!" in out
    assert "than the game could generate them!" in out
    assert "Correct answers: 4" in out
    assert "Incorrect answers: 1" in out
    assert "Score: 4/5" in out


def test_report_for_timeout(console):
    render_report(SessionResult(stats=SessionStats(), remaining=3), console)
    out = console.file.getvalue()
    assert "Time is up!" in out
    assert "Good job!" not in out
    assert "Score: 0/0" in out
    assert out.count("=" * 38) == 3
