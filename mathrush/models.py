"""Data models for the mathrush quiz.

Operator, Difficulty, Expression, SessionStats, SessionResult — the typed
structures that flow through generator → queue → consumer → report.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(str, Enum):
    """Arithmetic operators a problem can use."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def apply(self, left: int, right: int) -> int:
        """Evaluate ``left <op> right``. Division truncates."""
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUB:
            return left - right
        if self is Operator.MUL:
            return left * right
        return left // right


class Difficulty(int, Enum):
    """Difficulty levels. The value is what the user types on the command line."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @classmethod
    def parse(cls, text: str) -> Difficulty:
        """Parse '1'/'2'/'3' into a Difficulty.

        Raises:
            ValueError: if the text is not one of the three levels.
        """
        try:
            return cls(int(text))
        except (TypeError, ValueError):
            raise ValueError(f"invalid difficulty: {text!r}") from None


@dataclass(frozen=True)
class Expression:
    """One arithmetic problem. Immutable once generated."""

    left: int
    operator: Operator
    right: int

    def __post_init__(self) -> None:
        if self.operator in (Operator.SUB, Operator.DIV) and self.left < self.right:
            raise ValueError(f"{self.display()}: left operand must be >= right operand")
        if self.operator is Operator.DIV and self.right < 1:
            raise ValueError(f"{self.display()}: divisor must be >= 1")

    def display(self) -> str:
        return f"{self.left} {self.operator.value} {self.right}"

    def evaluate(self) -> int:
        return self.operator.apply(self.left, self.right)


@dataclass
class SessionStats:
    """Running score for one session. Only the consumer loop mutates it."""

    correct: int = 0
    incorrect: int = 0

    def record(self, is_correct: bool) -> None:
        if is_correct:
            self.correct += 1
        else:
            self.incorrect += 1

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def score(self) -> str:
        return f"{self.correct}/{self.total}"

    def to_dict(self) -> dict:
        return {"correct": self.correct, "incorrect": self.incorrect, "total": self.total}


@dataclass
class SessionResult:
    """Outcome of a finished session."""

    stats: SessionStats
    remaining: int
    elapsed_s: float = 0.0

    @property
    def drained(self) -> bool:
        """True when every question was answered before time ran out."""
        return self.remaining == 0

    def to_dict(self) -> dict:
        return {
            "stats": self.stats.to_dict(),
            "remaining": self.remaining,
            "drained": self.drained,
            "elapsed_s": round(self.elapsed_s, 1),
        }
