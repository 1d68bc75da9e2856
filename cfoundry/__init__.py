"""Data structures, diagnostics, process and file helpers, and a minimal HTTP server."""

__version__ = "1.4.0"