"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_page_var: contextvars.ContextVar[str] = contextvars.ContextVar("weeklydigest_page", default="-")
_step_var: contextvars.ContextVar[str] = contextvars.ContextVar("weeklydigest_step", default="-")


class _ContextFilter(logging.Filter):
    """Inject the page being exported into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.page = _page_var.get()  # type: ignore[attr-defined]
        record.step = _step_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def page_context(*, page: str, step: str | None = None) -> Any:
    """Temporarily bind the exported page for structured logging.

    Args:
        page: Page name.
        step: Optional step identifier.
    """

    token_page = _page_var.set(page)
    token_step = _step_var.set(step or _step_var.get())
    try:
        yield
    finally:
        _page_var.reset(token_page)
        _step_var.reset(token_step)


def set_step(step: str) -> None:
    """Update current step in context."""

    _step_var.set(step)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    # stderr keeps log lines out of digests printed to stdout
    handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, show_time=True, show_level=True
    )
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="page=%(page)s step=%(step)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log an exception with optional structured context."""

    if context:
        logger.exception("%s | context=%s", msg, context)
    else:
        logger.exception("%s", msg)
