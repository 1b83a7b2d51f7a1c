"""Classic algorithms and data structures: trees, linked lists, dynamic programming, searching and small containers."""

__version__ = "0.1.0"