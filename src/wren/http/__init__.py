"""Immutable HTTP request and response types."""
