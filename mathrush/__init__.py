"""mathrush — Timed arithmetic quiz for the terminal.

A producer thread adds a new problem to a shared queue every few seconds
while you answer the one at the front. Clear the queue before the clock
runs out and you win early.

Usage:
    python -m mathrush 60 2          # 60 second game, medium difficulty
    python -m mathrush --help
"""

__version__ = "0.1.0"
