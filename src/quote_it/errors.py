"""Exceptions raised by quote-it."""


class QuoteItError(Exception):
    """Base class for quote-it errors."""


class StoreError(QuoteItError, OSError):
    """The quote store could not be read or written."""


class UsageError(QuoteItError, ValueError):
    """Invalid command-line arguments."""
