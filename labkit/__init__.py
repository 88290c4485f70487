"""Coursework algorithms: word tables, numerical methods, regex automata and graphs."""

__version__ = "0.1.0"