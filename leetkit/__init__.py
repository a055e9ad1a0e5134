"""Data structures and algorithm helpers for interview-style problems."""

__version__ = "0.1.0"