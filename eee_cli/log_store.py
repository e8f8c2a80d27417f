"""
Append-only calculation log.

One line per successful computation, replayed verbatim in append order.
Writes are best-effort: a failed append is logged and reported as False,
it never raises into the calculator.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


class InMemoryLogStore:
    def __init__(self):
        self._lines: List[str] = []
        self._lock = threading.Lock()

    def append(self, line: str) -> bool:
        with self._lock:
            self._lines.append(line)
        return True

    def read_all(self) -> List[str]:
        with self._lock:
            return list(self._lines)


class FileLogStore:
    """Flat UTF-8 text file, created on the first append."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def append(self, line: str) -> bool:
        try:
            with self._lock, open(self._path, "a", encoding="utf-8") as fp:
                fp.write(line + "\n")
        except OSError:
            logger.warning("Could not append to calculation log %s", self._path, exc_info=True)
            return False
        return True

    def read_all(self) -> List[str]:
        """All stored lines in order; empty if nothing was saved yet.

        Bytes that are not valid UTF-8 come back as U+FFFD.
        """
        with self._lock:
            if not self._path.exists():
                return []
            with open(self._path, "r", encoding="utf-8", errors="replace") as fp:
                return [line.rstrip("\r\n") for line in fp]
