"""
quote-it: record and list short quotes from the terminal.

- Capture a quote with an optional author and timestamp
- List stored quotes, optionally filtered by author
"""

__version__ = "0.1.0"
