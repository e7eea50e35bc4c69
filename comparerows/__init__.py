"""Compare the rows of two text files."""

__version__ = "1.0.0"
