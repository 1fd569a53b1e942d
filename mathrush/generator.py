"""Random arithmetic problem generation.

Operand ranges widen with difficulty. Every range starts at 1; the upper
bounds live in one table so the per-level tuning is visible at a glance.
"""

from __future__ import annotations

import random
from typing import Optional

from mathrush.models import Difficulty, Expression, Operator

# Upper bounds per operator family: (left_max, right_max) by difficulty.
_BOUNDS: dict[str, dict[Difficulty, tuple[int, int]]] = {
    "add_sub": {
        Difficulty.EASY: (100, 100),
        Difficulty.MEDIUM: (500, 500),
        Difficulty.HARD: (1000, 1000),
    },
    "mul": {
        Difficulty.EASY: (12, 10),
        Difficulty.MEDIUM: (20, 10),
        Difficulty.HARD: (32, 12),
    },
    "div": {
        Difficulty.EASY: (100, 10),
        Difficulty.MEDIUM: (300, 14),
        Difficulty.HARD: (500, 20),
    },
}

_FAMILY = {
    Operator.ADD: "add_sub",
    Operator.SUB: "add_sub",
    Operator.MUL: "mul",
    Operator.DIV: "div",
}


def operand_bounds(operator: Operator, difficulty: Difficulty) -> tuple[int, int]:
    """Return (left_max, right_max) for an operator at a difficulty."""
    return _BOUNDS[_FAMILY[operator]][difficulty]


def generate(difficulty: Difficulty, rng: Optional[random.Random] = None) -> Expression:
    """Generate one random Expression for the given difficulty.

    Args:
        difficulty: Selects the operand ranges.
        rng: Random source. Defaults to the module-level ``random`` state.

    Returns:
        A valid Expression. Subtraction and division operands are swapped
        when needed so the left operand is never smaller than the right.
    """
    r = rng or random
    operator = r.choice(list(Operator))
    left_max, right_max = operand_bounds(operator, difficulty)
    left = r.randint(1, left_max)
    right = r.randint(1, right_max)
    if operator in (Operator.SUB, Operator.DIV) and left < right:
        left, right = right, left
    return Expression(left=left, operator=operator, right=right)


class ExpressionGenerator:
    """Generator bound to one session's difficulty and random source."""

    def __init__(self, difficulty: Difficulty, seed: Optional[int] = None):
        self.difficulty = difficulty
        self._rng = random.Random(seed)

    def __call__(self) -> Expression:
        return generate(self.difficulty, self._rng)
