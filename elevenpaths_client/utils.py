"""
Hashing, HMAC and clock helpers used by the signer.
"""

import base64
import datetime
import hashlib
import hmac
from typing import Union

from .constants import UTC_STRING_FORMAT
from .exceptions import CryptoError, EncodingError, InvalidInputError

_BYTES_TYPES = (bytes, bytearray, memoryview)


def current_utc() -> str:
    """Return the current UTC time formatted for the X-11Paths-Date header."""
    return datetime.datetime.now(datetime.timezone.utc).strftime(UTC_STRING_FORMAT)


def to_ascii(value: str, what: str = "value") -> bytes:
    """
    Encode a string as ASCII.

    Raises:
        EncodingError: If the string contains non-ASCII characters
    """
    try:
        return value.encode('ascii')
    except UnicodeEncodeError as e:
        raise EncodingError(f"{what} must be ASCII: {e}") from e


def sha1(data: bytes) -> str:
    """
    Hash raw bytes with SHA-1.

    Args:
        data: Bytes to hash

    Returns:
        Lower-case hex digest without separators

    Raises:
        InvalidInputError: If data is not bytes-like
        CryptoError: If the hash primitive fails
    """
    if not isinstance(data, _BYTES_TYPES):
        raise InvalidInputError(f"cannot hash {type(data).__name__}, expected bytes")

    try:
        return hashlib.sha1(data).hexdigest()
    except (TypeError, ValueError) as e:
        raise CryptoError(f"SHA-1 hashing failed: {e}") from e


def hmac_sha1_base64(key: Union[str, bytes], message: Union[str, bytes]) -> str:
    """
    Compute Base64(HMAC-SHA1(key, message)).

    String arguments are encoded as ASCII so the digest is computed over the
    same bytes the server uses.

    Raises:
        InvalidInputError: If the string to sign is empty
        EncodingError: If a string argument is not ASCII
        CryptoError: If the HMAC primitive fails
    """
    if isinstance(key, str):
        key = to_ascii(key, "secret key")
    if isinstance(message, str):
        message = to_ascii(message, "string to sign")
    if not message:
        raise InvalidInputError("string to sign can not be empty")

    try:
        mac = hmac.new(key, message, hashlib.sha1)
        return base64.b64encode(mac.digest()).decode('ascii')
    except (TypeError, ValueError) as e:
        raise CryptoError(f"HMAC-SHA1 computation failed: {e}") from e


def content_bytes(content: Union[str, bytes, bytearray, memoryview], what: str = "content") -> bytes:
    """
    Return the bytes of a body or file payload. Strings are UTF-8 encoded.

    Raises:
        InvalidInputError: If content is neither a string nor bytes-like
    """
    if isinstance(content, str):
        return content.encode('utf-8')
    if isinstance(content, _BYTES_TYPES):
        return bytes(content)
    raise InvalidInputError(f"{what} must be str or bytes, not {type(content).__name__}")
