"""
Custom exceptions for the 11PATHS client library.
"""


class ElevenPathsError(Exception):
    """Base exception for 11PATHS client errors."""
    pass


class InvalidInputError(ElevenPathsError):
    """Raised when a path, timestamp, method or credential is missing or malformed."""
    pass


class CryptoError(ElevenPathsError):
    """Raised when the HMAC or hash primitive fails."""
    pass


class EncodingError(ElevenPathsError):
    """Raised when data that must be ASCII is not."""
    pass


class ConfigurationError(ElevenPathsError):
    """Raised when client configuration is invalid."""
    pass


class InputTooLargeError(ElevenPathsError):
    """Raised when a body or file payload exceeds size limits."""
    pass


class HTTPError(ElevenPathsError):
    """Raised when HTTP request fails."""
    pass
