"""A small Redis-like key-value server and Linux system statistics tools."""

__version__ = "0.1.0"