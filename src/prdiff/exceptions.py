"""Custom exceptions for prdiff.

The parsers themselves never raise on malformed diff text; these cover the
surface around them (settings, reading input).
"""


class PrDiffError(Exception):
    """Base exception for prdiff."""
    pass


class ConfigError(PrDiffError):
    """Configuration errors."""
    pass


class InputError(PrDiffError):
    """Raised when diff or patch input cannot be read."""
    pass
