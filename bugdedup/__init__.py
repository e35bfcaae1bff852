"""Replay of bug report histories for duplicate retrieval, with result collection and reporting."""

__version__ = "0.1.0"