"""Session configuration and startup validation.

Everything here runs before any thread starts: a bad argument or an
unwritable log file ends the program with a distinct exit code.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mathrush.models import Difficulty

MIN_DURATION_S = 9
DEFAULT_CADENCE_S = 3.0
DEFAULT_LOG_PATH = Path("log.txt")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID = 2
EXIT_LOG_FILE = 3


class ConfigError(Exception):
    """Invalid startup input. Carries the process exit code to use."""

    def __init__(self, message: str, exit_code: int = EXIT_INVALID):
        super().__init__(message)
        self.exit_code = exit_code


@dataclass
class QuizConfig:
    """Everything a session needs to run."""

    duration_s: float
    difficulty: Difficulty
    log_path: Path = DEFAULT_LOG_PATH
    cadence_s: float = DEFAULT_CADENCE_S
    seed: Optional[int] = None


def parse_duration(text: str) -> float:
    """Parse the duration argument as a finite number of seconds."""
    try:
        value = float(text)
    except ValueError:
        raise ConfigError("Invalid input. Duration must be a number") from None
    if not math.isfinite(value):
        raise ConfigError("Invalid input. Duration must be a number")
    return value


def build_config(
    duration_text: str,
    difficulty_text: str,
    log_path: Optional[Path] = None,
    seed: Optional[int] = None,
) -> QuizConfig:
    """Validate raw command-line values and build a QuizConfig.

    Checks run in a fixed order: duration is numeric, difficulty is 1-3,
    duration is long enough.

    Raises:
        ConfigError: with exit code 2 on the first failed check.
    """
    duration = parse_duration(duration_text)
    try:
        difficulty = Difficulty.parse(difficulty_text)
    except ValueError:
        raise ConfigError("Invalid input. Difficulty must be 1 (easy)/ 2 (medium)/ 3 (hard)") from None
    if duration <= MIN_DURATION_S:
        raise ConfigError(f"Duration must be greater than {MIN_DURATION_S} seconds")
    return QuizConfig(
        duration_s=duration,
        difficulty=difficulty,
        log_path=log_path or DEFAULT_LOG_PATH,
        seed=seed,
    )
