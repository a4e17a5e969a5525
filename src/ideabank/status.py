"""
Diagnostic log shared by every session operation.

Lines are kept only while verbose is on. Nothing drains the log; callers
clear it when they have shown it.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional
import logging
import threading

logger = logging.getLogger(__name__)


class StatusLog:
    """Append-only buffer of human-readable progress and error lines."""

    def __init__(self, verbose: bool = True):
        self._lines: List[str] = []
        self._verbose = verbose
        self._lock = threading.RLock()

    @property
    def verbose(self) -> bool:
        return self._verbose

    def set_verbose(self, verbose: bool) -> None:
        self._verbose = bool(verbose)

    def append(self, line: str) -> None:
        logger.debug(line)
        if not self._verbose:
            return
        with self._lock:
            self._lines.append(line)

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()

    def read(self) -> str:
        with self._lock:
            return "".join(f"{line}\n" for line in self._lines)

    @property
    def lines(self) -> List[str]:
        with self._lock:
            return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @contextmanager
    def overridden(self, verbose: Optional[bool]) -> Iterator["StatusLog"]:
        """Temporarily force the verbose flag; None leaves it untouched."""
        if verbose is None:
            yield self
            return
        previous = self._verbose
        self._verbose = bool(verbose)
        try:
            yield self
        finally:
            self._verbose = previous
