"""Classic algorithms, numeric routines and small data structures."""

__version__ = "0.1.0"