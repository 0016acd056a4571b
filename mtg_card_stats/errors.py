"""Exceptions raised by the card stats library."""

from typing import Optional


class LoadError(Exception):
    """The card document could not be fetched or parsed."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        message = super().__str__()
        if self.source:
            return f"{message} (source: {self.source})"
        return message
