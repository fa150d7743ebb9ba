"""Package metadata reported by the health check."""

__version__ = "0.1.0"
__author__ = "code-Gambler"
