"""A small command interpreter: a read-run loop, builtins and PATH lookup."""

__version__ = "0.1.0"