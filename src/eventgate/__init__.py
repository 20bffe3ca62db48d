"""
eventgate – authorization and event-lifecycle gating.

Import path convention::

    from eventgate.application.session import AuthorizationSession
    from eventgate.application.gate import ActionGate, compute_gate
    from eventgate.kernel.security import Principal, ResolvedRole
    from eventgate.kernel.events import Event, event_from_payload
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
