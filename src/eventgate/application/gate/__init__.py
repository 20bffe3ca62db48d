"""Action gates – the actions a caller may surface for a (principal, event) pair."""
from eventgate.application.lifecycle.rules import Action
from eventgate.application.gate.computer import ActionGate, GateComputer, compute_gate

__all__ = ["Action", "ActionGate", "GateComputer", "compute_gate"]
