"""
11PATHS request signing.

The string to sign is built from the request method, the X-11Paths-Date
timestamp, the serialized X-11paths- headers, the path and, for form or
query requests, the serialized params:

    METHOD\\n
    timestamp\\n
    x-11paths-header:value ...\\n
    /path?query[\\n
    k=v&...]

and the Authorization header is ``11PATHS <app id> <Base64 HMAC-SHA1>``.
Every signing function is pure: the timestamp comes from the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .canonical import serialize_headers, serialize_params
from .constants import (
    AUTHORIZATION_HEADER_FIELD_SEPARATOR,
    AUTHORIZATION_HEADER_NAME,
    AUTHORIZATION_METHOD,
    BODY_HASH_HEADER_NAME,
    DATE_HEADER_NAME,
    FILE_HASH_HEADER_NAME,
    HTTP_METHODS,
    PAYLOAD_METHODS,
    QUERY_METHODS,
)
from .exceptions import InvalidInputError
from .utils import content_bytes, hmac_sha1_base64, sha1, to_ascii

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class Credentials:
    """Application ID and secret issued for the API. The secret never leaves the client."""

    app_id: str
    secret_key: str = field(repr=False)

    def __post_init__(self):
        if _is_blank(self.app_id):
            raise InvalidInputError("app_id cannot be empty")
        if _is_blank(self.secret_key):
            raise InvalidInputError("secret_key cannot be empty")
        to_ascii(self.app_id, "app_id")
        to_ascii(self.secret_key, "secret_key")


@dataclass(frozen=True)
class SignatureResult:
    """Authentication headers for a single request."""

    authorization: str
    date: str
    body_hash: Optional[str] = None
    file_hash: Optional[str] = None

    def __post_init__(self):
        if self.body_hash is not None and self.file_hash is not None:
            raise InvalidInputError("a request cannot sign both a body and a file")

    def headers(self) -> Dict[str, str]:
        """Return the headers to merge into the outgoing request."""
        headers = {
            AUTHORIZATION_HEADER_NAME: self.authorization,
            DATE_HEADER_NAME: self.date,
        }
        if self.body_hash is not None:
            headers[BODY_HASH_HEADER_NAME] = self.body_hash
        if self.file_hash is not None:
            headers[FILE_HASH_HEADER_NAME] = self.file_hash
        return headers


def _check_method(method: str, allowed: Sequence[str] = HTTP_METHODS) -> str:
    if _is_blank(method):
        raise InvalidInputError("method cannot be empty")
    verb = method.strip().upper()
    if verb not in allowed:
        raise InvalidInputError(
            f"method {method!r} not supported here, expected one of {', '.join(allowed)}"
        )
    return verb


def _check_request(path: str, timestamp: str):
    if _is_blank(path):
        raise InvalidInputError("path cannot be empty")
    if _is_blank(timestamp):
        raise InvalidInputError("timestamp cannot be empty")


def build_string_to_sign(method: str, path: str, timestamp: str,
                         x_headers: Optional[Mapping[str, str]] = None,
                         params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Build the canonical string signed for a request.

    The serialized headers always take a line, even when empty. The params
    line is only added when there are params.
    """
    verb = _check_method(method)
    _check_request(path, timestamp)

    string_to_sign = "\n".join((verb, timestamp, serialize_headers(x_headers), path.strip()))
    serialized_params = serialize_params(params)
    if serialized_params:
        string_to_sign += "\n" + serialized_params
    return string_to_sign


def calculate_signed_headers(credentials: Credentials, method: str, path: str, timestamp: str,
                             x_headers: Optional[Mapping[str, str]] = None,
                             params: Optional[Mapping[str, Any]] = None) -> SignatureResult:
    """
    Sign a request and return its Authorization and X-11Paths-Date headers.

    Args:
        credentials: Application ID and secret
        method: HTTP method
        path: URL-encoded path from the first slash, query string included
        timestamp: X-11Paths-Date value
        x_headers: X-11paths- headers taking part in the signature
        params: URL-decoded form or query params

    Raises:
        InvalidInputError: If method, path or timestamp are missing
        EncodingError: If the string to sign is not ASCII
        CryptoError: If the HMAC computation fails
    """
    string_to_sign = build_string_to_sign(method, path, timestamp, x_headers, params)
    signed_data = hmac_sha1_base64(credentials.secret_key, string_to_sign)

    authorization = AUTHORIZATION_HEADER_FIELD_SEPARATOR.join(
        (AUTHORIZATION_METHOD, credentials.app_id, signed_data)
    )
    return SignatureResult(authorization=authorization, date=timestamp)


def sign(credentials: Credentials, method: str, path: str, timestamp: str) -> SignatureResult:
    """Sign a request with no custom headers and no params."""
    logger.debug(f"Signing {method} {path}")
    return calculate_signed_headers(credentials, method, path, timestamp)


def sign_for_query(credentials: Credentials, method: str, path: str, timestamp: str,
                   query_params: Optional[Mapping[str, Any]]) -> SignatureResult:
    """
    Sign a GET or DELETE request whose params travel in the query string.

    The params are signed the same way as form params.
    """
    verb = _check_method(method, QUERY_METHODS)
    logger.debug(f"Signing {verb} {path} with {len(query_params or {})} query params")
    return calculate_signed_headers(credentials, verb, path, timestamp, params=query_params)


def sign_for_params(credentials: Credentials, method: str, path: str, timestamp: str,
                    params: Optional[Mapping[str, Any]]) -> SignatureResult:
    """Sign a POST or PUT request with an application/x-www-form-urlencoded body."""
    verb = _check_method(method, PAYLOAD_METHODS)
    logger.debug(f"Signing {verb} {path} with {len(params or {})} form params")
    return calculate_signed_headers(credentials, verb, path, timestamp, params=params)


def sign_for_body(credentials: Credentials, method: str, path: str, timestamp: str,
                  body: Optional[Union[str, bytes]]) -> SignatureResult:
    """
    Sign a POST or PUT request with a raw body.

    The SHA-1 of the body is signed as X-11paths-Body-Hash and returned in
    the result. A ``None`` body is signed without the header.
    """
    verb = _check_method(method, PAYLOAD_METHODS)
    if body is None:
        logger.debug(f"Signing {verb} {path} without body")
        return calculate_signed_headers(credentials, verb, path, timestamp)

    body_hash = sha1(content_bytes(body, "body"))
    logger.debug(f"Signing {verb} {path} with body hash {body_hash}")
    result = calculate_signed_headers(
        credentials, verb, path, timestamp, x_headers={BODY_HASH_HEADER_NAME: body_hash}
    )
    return SignatureResult(authorization=result.authorization, date=result.date, body_hash=body_hash)


def sign_for_file(credentials: Credentials, method: str, path: str, timestamp: str,
                  file_content: Optional[bytes]) -> SignatureResult:
    """
    Sign a POST or PUT request uploading a file.

    Same as sign_for_body, but the hash is tagged X-11paths-File-Hash.
    """
    verb = _check_method(method, PAYLOAD_METHODS)
    if file_content is None:
        logger.debug(f"Signing {verb} {path} without file")
        return calculate_signed_headers(credentials, verb, path, timestamp)

    file_hash = sha1(content_bytes(file_content, "file content"))
    logger.debug(f"Signing {verb} {path} with file hash {file_hash}")
    result = calculate_signed_headers(
        credentials, verb, path, timestamp, x_headers={FILE_HASH_HEADER_NAME: file_hash}
    )
    return SignatureResult(authorization=result.authorization, date=result.date, file_hash=file_hash)
