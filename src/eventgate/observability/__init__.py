"""Observability – logging and audit."""

from eventgate.observability.logging import AuditLogger, JsonLoggerFactory, configure_logging, get_logger

__all__ = ["AuditLogger", "JsonLoggerFactory", "configure_logging", "get_logger"]
