"""Application layer – lifecycle rules, action gates and the session boundary."""
