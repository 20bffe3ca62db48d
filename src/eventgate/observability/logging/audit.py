"""Observability – AuditLogger.

A dedicated structured-log sink for authorization decisions and session
boundaries.  Entries are emitted at ``WARNING`` level so they pass through
restrictive log-level filters; timestamps come from the logging pipeline.
"""
from __future__ import annotations

from typing import Any

from eventgate.observability.logging.processors import get_logger


class AuditLogger:
    """Structured audit sink.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger.  Defaults to one named ``audit``.
    """

    def __init__(self, service: str = "eventgate", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def log_gate(self, principal: Any, event: Any, gate: Any) -> None:
        """Record the action gate computed for *principal* on *event*.

        *gate* must provide ``to_dict()`` and ``allowed_actions()``.
        """
        self._emit(
            "audit.gate",
            principal_id=getattr(principal, "id", None),
            event_id=getattr(event, "id", None),
            can_view=gate.can_view,
            can_manage=gate.can_manage,
            allowed=sorted(action.value for action in gate.allowed_actions()),
        )

    def log_session(self, event_type: str, principal: Any = None, **extra: Any) -> None:
        """Record a session boundary such as ``"login"`` or ``"logout"``."""
        self._emit(
            f"audit.{event_type}",
            event_type=event_type,
            principal_id=getattr(principal, "id", None),
            **extra,
        )

    def _emit(self, event: str, **fields: Any) -> None:
        self._log.warning(event, service=self._service, **fields)


__all__ = ["AuditLogger"]
