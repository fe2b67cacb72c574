"""Sort integers on two stacks with a limited set of moves."""

__version__ = "0.1.0"

__all__ = ["__version__"]