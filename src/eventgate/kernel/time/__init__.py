"""Kernel time – Clock port and implementations."""
from eventgate.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
