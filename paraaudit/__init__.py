"""Auditing, searching and managing modules in a PARA-style directory tree."""

__version__ = "0.1.0"