"""Audit open GitHub issues against a required label prefix."""

__version__ = "0.1.0"
