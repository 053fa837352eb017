"""Bit puzzles and their checker, number inspectors, a cache simulator and small containers for systems labs."""

__version__ = "0.1.0"