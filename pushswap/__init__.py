"""Two-stack integer sorting that reports the stack operations it performs."""

__version__ = "1.0.0"
__all__ = ["algorithm", "cli", "parsing", "stacks"]