"""Observability – get_logger helper and principal context binding."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to *initial_values*.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def bind_principal_context(principal_id: str | None) -> None:
    """Attach ``principal_id`` to every log line emitted in this context."""
    structlog.contextvars.bind_contextvars(principal_id=principal_id)


def clear_principal_context() -> None:
    structlog.contextvars.unbind_contextvars("principal_id")


__all__ = ["bind_principal_context", "clear_principal_context", "get_logger"]
