"""Observability – structured logging helpers."""
from eventgate.observability.logging.factory import (
    JsonLoggerFactory,
    configure_from_settings,
    configure_logging,
)
from eventgate.observability.logging.processors import (
    bind_principal_context,
    clear_principal_context,
    get_logger,
)
from eventgate.observability.logging.audit import AuditLogger

__all__ = [
    "AuditLogger",
    "JsonLoggerFactory",
    "bind_principal_context",
    "clear_principal_context",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
]
