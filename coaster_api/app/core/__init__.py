"""Core infrastructure: configuration, logging and security helpers."""
