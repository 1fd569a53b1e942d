"""Answer input for the consumer loop.

Lines are read on a daemon thread and handed over through a queue, so the
consumer can give up waiting when the session deadline passes instead of
sitting in a blocking ``readline`` forever.
"""

from __future__ import annotations

import logging
import queue
import re
import threading
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")

# Marks end of input on the line queue
_EOF = object()


def parse_answer(text: str) -> Optional[int]:
    """Parse a typed answer. Returns None unless it is a plain integer."""
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


class AnswerReader:
    """Reads lines from a text stream in the background.

    Args:
        stream: Source of answers, usually ``sys.stdin``.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._lines: queue.Queue = queue.Queue()
        self._closed = False
        self._thread = threading.Thread(target=self._pump, name="answer-reader", daemon=True)
        self._thread.start()

    def _pump(self) -> None:
        try:
            for line in iter(self._stream.readline, ""):
                self._lines.put(line.rstrip("\r\n"))
        except (OSError, ValueError) as e:
            logger.debug(f"Answer stream closed: {e}")
        self._lines.put(_EOF)

    def read(self, timeout: Optional[float] = None) -> Optional[str]:
        """Return the next line, or None if nothing arrived within ``timeout``.

        Raises:
            EOFError: once the stream is exhausted.
        """
        if self._closed:
            raise EOFError("answer stream closed")
        try:
            item = self._lines.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is _EOF:
            self._closed = True
            raise EOFError("answer stream closed")
        return item
