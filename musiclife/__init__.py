"""A text-based band management game played on a console."""

__version__ = "0.1.0"