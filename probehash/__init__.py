"""Linear-probing hash tables with traditional and Fibonacci hashing, and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]