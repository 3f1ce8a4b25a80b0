"""Helpers for audio software: byte swapping, strings, PRNGs, a repeat timer and logging."""

__version__ = "0.1.0"
__all__ = ["types", "random", "timer", "log"]