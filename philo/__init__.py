"""Dining philosophers simulation with threads, forks and a starvation watcher."""

__version__ = "0.1.0"