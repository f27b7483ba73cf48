"""Favlink exceptions."""


class FavlinkError(Exception):
    """Base class for Favlink errors."""


class ShortcodeTagError(FavlinkError):
    """Raised when a shortcode tag name cannot be registered."""

    def __init__(self, message: str, tag: str = ""):
        self.message = message
        self.tag = tag
        super().__init__(message)

    def __str__(self) -> str:
        if self.tag:
            return f"[{self.tag}]: {self.message}"
        return self.message


class ContentNotFoundError(FavlinkError):
    """Raised when a requested content file cannot be served."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Content not found: {path}")
