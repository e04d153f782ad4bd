"""Domain error types.

Both concrete errors subclass ValueError so callers that already guard
parsing with ``except ValueError`` keep working.
"""


class ShopstoreError(Exception):
    """Root of every error raised by the shopstore domain layer."""


class MalformedMetadataError(ShopstoreError, ValueError):
    """The metas attribute holds something other than a JSON object or null."""


class MalformedTimestampError(ShopstoreError, ValueError):
    """A temporal attribute does not match ``YYYY-MM-DD HH:MM:SS``."""
