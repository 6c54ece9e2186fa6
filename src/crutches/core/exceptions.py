"""Exceptions raised by the crutches helpers."""

__all__ = ["InvalidOptionError"]


class InvalidOptionError(ValueError):
    """Raised when an options mapping contains a key that is not recognized.

    Attributes:
        key: The name of the first offending option key.
    """

    def __init__(self, key):
        self.key = key
        super().__init__(f"Unknown key {key}")
