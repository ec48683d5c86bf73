"""
11PATHS Client Library

A Python client library that signs requests with the 11PATHS HMAC-SHA1
authentication scheme and sends them with requests.

Example usage:
    from elevenpaths_client import ElevenPathsClient

    client = ElevenPathsClient("https://api.example.com", "your-app-id", "your-secret-key")
    response = client.get("/api/0.1/status")

Or, to only compute the headers:
    from elevenpaths_client import Credentials, sign_for_body

    result = sign_for_body(credentials, "POST", "/api/0.1", "2015-06-23 12:48:17", body)
    headers = result.headers()
"""

from .canonical import serialize_headers, serialize_params
from .client import ElevenPathsClient
from .exceptions import (
    ElevenPathsError,
    InvalidInputError,
    CryptoError,
    EncodingError,
    ConfigurationError,
    InputTooLargeError,
    HTTPError
)
from .constants import (
    AUTHORIZATION_HEADER_NAME,
    DATE_HEADER_NAME,
    BODY_HASH_HEADER_NAME,
    FILE_HASH_HEADER_NAME,
    DEFAULT_CONFIG,
    MAX_INPUT_SIZE
)
from .signer import (
    Credentials,
    SignatureResult,
    sign,
    sign_for_query,
    sign_for_params,
    sign_for_body,
    sign_for_file
)
from .utils import current_utc, sha1

__version__ = "1.0.0"
__all__ = [
    "ElevenPathsClient",
    "Credentials",
    "SignatureResult",
    "sign",
    "sign_for_query",
    "sign_for_params",
    "sign_for_body",
    "sign_for_file",
    "serialize_headers",
    "serialize_params",
    "current_utc",
    "sha1",
    "ElevenPathsError",
    "InvalidInputError",
    "CryptoError",
    "EncodingError",
    "ConfigurationError",
    "InputTooLargeError",
    "HTTPError",
    "AUTHORIZATION_HEADER_NAME",
    "DATE_HEADER_NAME",
    "BODY_HASH_HEADER_NAME",
    "FILE_HASH_HEADER_NAME",
    "DEFAULT_CONFIG",
    "MAX_INPUT_SIZE"
]
