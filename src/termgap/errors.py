"""Error classes for termgap.

This module provides:
- TermGapError: Base exception class for all termgap errors
- InvalidArgumentError: Rejected search input (empty text or terms, bad gap)
- ResourceExhaustedError: Allocation failure while scanning or linking
- WireFormatError: Malformed legacy wire data
- ConfigurationError: Invalid search configuration
"""


class TermGapError(Exception):
    """Base exception for all termgap errors."""

    pass


class InvalidArgumentError(TermGapError, ValueError):
    """Raised when a search request is invalid.

    Raised before any scanning work is done.
    """

    pass


class ResourceExhaustedError(TermGapError):
    """Raised when intermediate or result data cannot be allocated.

    The search engine converts this into a truncated result rather than
    letting it reach the caller.
    """

    pass


class WireFormatError(TermGapError):
    """Raised when legacy wire data cannot be encoded or decoded."""

    pass


class ConfigurationError(TermGapError):
    """Raised when search configuration is invalid."""

    pass
