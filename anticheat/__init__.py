"""Launch a target program, check whether it is running, and terminate it."""

__version__ = "0.1.0"
__all__ = ["__version__"]