"""droidstrings exception hierarchy.

Malformed documents and unknown paths are not errors: the codec extracts
what it can and reports "nothing found". Exceptions are reserved for
callers that opt into strict behavior. I/O failures (OSError,
UnicodeDecodeError) are never wrapped and reach the caller unchanged.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "PlaceholderMismatchError",
    "StringsError",
]


class StringsError(Exception):
    """Base exception for all droidstrings errors."""


class PlaceholderMismatchError(StringsError):
    """Value mixes numbered and non-numbered placeholders.

    Android cannot reorder "%1$s and %d": positional numbering would
    have to guess which argument the bare placeholder refers to.
    Only raised by converters built with ``strict=True``.

    Attributes:
        value: The canonical value that failed to convert
    """

    def __init__(self, value: str) -> None:
        """Initialize PlaceholderMismatchError.

        Args:
            value: The canonical value that failed to convert
        """
        msg = f'The value "{value}" contains numbered and non-numbered placeholders'
        super().__init__(msg)
        self.value = value
