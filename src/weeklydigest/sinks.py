"""Destinations for a finished digest."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import typer

from weeklydigest.logging import get_logger

logger = get_logger(__name__)


class DigestSink(Protocol):
    """Receives the finished digest text."""

    def emit(self, text: str) -> None: ...


@dataclass
class LogSink:
    """Write the digest to the log channel."""

    level: int = logging.INFO

    def emit(self, text: str) -> None:
        # Never below the configured threshold, or the digest would be dropped.
        level = max(self.level, logger.getEffectiveLevel())
        logger.log(level, "%s", text)


class StdoutSink:
    """Print the digest as-is."""

    def emit(self, text: str) -> None:
        typer.echo(text, nl=False)


@dataclass
class FileSink:
    """Write the digest to a UTF-8 file, replacing any previous content."""

    path: Path

    def emit(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        logger.info("Wrote digest to %s", self.path)
