from pathlib import Path
from typing import Optional


class PostsError(Exception):
    """Base error for the posts pipeline."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            return f"{message} ({self.path})"
        return message


class DiscoveryError(PostsError):
    """Raised when the posts directory cannot be listed."""


class ParseError(PostsError):
    """Raised when a post file cannot be read or decoded into a Post."""


class ConversionError(PostsError):
    """Raised when markdown conversion fails."""
