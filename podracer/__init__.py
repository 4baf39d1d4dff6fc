"""Evolutionary trajectory planner for a turn-based pod racing game."""

__version__ = "0.1.0"
