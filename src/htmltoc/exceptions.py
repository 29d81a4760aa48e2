"""Custom exceptions for htmltoc."""


class HtmlTocError(Exception):
    """Base exception for htmltoc operations."""


class ParseError(HtmlTocError):
    """Error during markup parsing."""


class CacheError(HtmlTocError):
    """Cached result could not be read back."""
