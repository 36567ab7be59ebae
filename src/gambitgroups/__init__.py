"""Gambit Groups: group-stage round robin chess tournaments."""

__version__ = "0.1.0"
