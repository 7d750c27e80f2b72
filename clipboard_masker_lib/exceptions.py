"""
Custom exception hierarchy for the clipboard‑masker library.

All public exceptions inherit from :class:`ClipboardMaskerError`, allowing
callers to catch a single base class for any masker‑related failure while
still being able to differentiate specific error conditions when needed.

The masking core itself never raises – these exceptions surface only from the
settings layer, the HTTP client and the custom pattern compiler (whose errors
are caught by the anonymizer).
"""


class ClipboardMaskerError(Exception):
    """Base exception for all clipboard‑masker‑specific errors."""

    pass


class SettingsValidationError(ClipboardMaskerError):
    """Raised when a settings mutation carries invalid data."""

    pass


class PatternNotFoundError(ClipboardMaskerError):
    """Raised when a custom pattern with the given id does not exist."""

    pass


class InvalidPatternError(ClipboardMaskerError):
    """Raised when a custom regular expression cannot be compiled."""

    pass


class AuthenticationError(ClipboardMaskerError):
    """Raised when the server returns HTTP 401/403 – invalid or missing token."""

    pass


class RateLimitError(ClipboardMaskerError):
    """Raised when the server returns HTTP 429 – request rate limit exceeded."""

    pass
