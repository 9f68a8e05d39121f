"""Constant tables shared across Scribe modules."""
