"""Shared helpers for peon-ping."""
