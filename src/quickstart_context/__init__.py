"""Draft a README quickstart from recent shell history and project files."""

__version__ = "0.1.0"
