"""
Logging setup with contextvars-based metadata injection.

- Adds the active category and filter query into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- The full-screen browser raises the console threshold so log lines do not
  tear the rendered screen; the file handler keeps DEBUG detail.
"""

import contextvars
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_category = contextvars.ContextVar("category", default="-")
cv_query = contextvars.ContextVar("query", default="")
cv_mode = contextvars.ContextVar("mode", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.category = cv_category.get() or "-"
        record.query = cv_query.get() or "-"
        record.mode = cv_mode.get() or "-"
        return True


def set_log_context(
    *,
    category: str | None = None,
    query: str | None = None,
    mode: str | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if category is not None:
        cv_category.set(str(category))
    if query is not None:
        cv_query.set(str(query))
    if mode is not None:
        cv_mode.set(str(mode))


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5_000_000,  # 5MB
    backup_count: int = 3,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (None for console only)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] %(mode)s c=%(category)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | %(mode)s c=%(category)s q=%(query)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    # Console handler goes to stderr so listing output on stdout stays clean
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
