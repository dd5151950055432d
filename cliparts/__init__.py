"""Building blocks for command-line parsers: error types, name splitting, value conversion and timing."""

__version__ = "1.8.0"
__all__ = ["errors", "split", "typetools", "timer", "version"]