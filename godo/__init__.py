"""A command-line todo list manager with JSON storage and per-task time tracking."""

__version__ = "0.1.0"

__all__ = ["__version__"]