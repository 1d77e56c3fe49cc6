"""Custom exceptions for markview."""


class MarkviewError(Exception):
    """Base exception for markview operations."""


class SourceError(MarkviewError):
    """Error while loading source text."""


class SourceNotFoundError(SourceError):
    """Source file does not exist."""


class ThemeError(MarkviewError):
    """Highlighter style could not be loaded."""
