"""
Module: connectors.audit_sink

Append-only sinks for formatted audit lines written on every transfer.
"""

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class AuditSink(Protocol):
    """Receives one formatted line per audited mutation."""

    def write(self, line: str) -> None: ...


class InMemoryAuditSink:
    """
    Dummy in-memory audit sink for tests.
    """

    def __init__(self):
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)


class FileAuditSink:
    """
    Appends audit lines to a UTF-8 text file, one per line.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def write(self, line: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(line.rstrip("\n") + "\n")
        logger.debug(f"Audit line appended to {self.path}")
