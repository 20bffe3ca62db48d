"""Kernel – errors, clock, security primitives and the event model."""
