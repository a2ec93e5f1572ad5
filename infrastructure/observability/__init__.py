"""
Observability: structured logging and context management.

Provides:
- Contextual logging with category/query metadata
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    configure_logging,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
]
