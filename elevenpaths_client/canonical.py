"""
Canonical serialization of custom headers and request parameters.

Both serializers sort with plain ``str`` comparison (code point order) so the
string to sign never depends on the caller's mapping order or the platform
locale.
"""

from typing import Any, Mapping, Optional
from urllib.parse import quote, quote_plus

from .constants import (
    AUTHORIZATION_HEADER_FIELD_SEPARATOR,
    PARAM_SEPARATOR,
    PARAM_VALUE_SEPARATOR,
    QUERYSTRING_DELIMITER,
    X_11PATHS_HEADER_PREFIX,
    X_11PATHS_HEADER_SEPARATOR,
)
from .exceptions import InvalidInputError

# Characters left unescaped by the server's form decoder besides [A-Za-z0-9_.-]
_FORM_SAFE = "!*()"


def url_encode(value: str) -> str:
    """
    Form-encode a string in UTF-8.

    Spaces become ``+`` and escapes use upper-case hex. ``~`` is escaped.
    """
    return quote_plus(value, safe=_FORM_SAFE).replace("~", "%7E")


def url_path_encode(value: str) -> str:
    """Percent-encode a string for use in a query string (space as ``%20``)."""
    return quote(value, safe="")


def _param_value(key: str, value: Any) -> str:
    if value is None:
        raise InvalidInputError(f"parameter {key!r} has no value")
    return value if isinstance(value, str) else str(value)


def _header_value(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"header {name!r} must have a string value")
    return value.replace("\n", " ")


def serialize_headers(headers: Optional[Mapping[str, str]]) -> str:
    """
    Prepare the custom headers of a request for signing.

    Args:
        headers: Header name to value mapping, in any order. Names without
            the X-11paths- prefix are ignored.

    Returns:
        ``name:value`` pairs with lower-cased names, sorted by name and
        joined by a space, with trailing spaces stripped as the server
        does. Empty string for no headers.

    Raises:
        InvalidInputError: If a header value is not a string
    """
    if not headers:
        return ""

    prefix = X_11PATHS_HEADER_PREFIX.lower()
    selected = sorted(
        (name.lower(), _header_value(name, value))
        for name, value in headers.items()
        if name.lower().startswith(prefix)
    )
    return AUTHORIZATION_HEADER_FIELD_SEPARATOR.join(
        name + X_11PATHS_HEADER_SEPARATOR + value for name, value in selected
    ).rstrip(AUTHORIZATION_HEADER_FIELD_SEPARATOR)


def serialize_params(params: Optional[Mapping[str, Any]]) -> str:
    """
    Prepare request parameters for signing.

    Args:
        params: URL-decoded parameters sent in the body of a form request,
            or in the query string of a GET/DELETE request.

    Returns:
        Form-encoded ``key=value`` pairs sorted by raw key and joined by
        ``&``. Empty string for no params.

    Raises:
        InvalidInputError: If a parameter value is None
    """
    if not params:
        return ""

    return PARAM_SEPARATOR.join(
        url_encode(key) + PARAM_VALUE_SEPARATOR + url_encode(_param_value(key, params[key]))
        for key in sorted(params)
    )


def build_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """Build ``?k=v&...`` from params in caller order, or ``""`` when empty."""
    if not params:
        return ""

    return QUERYSTRING_DELIMITER + PARAM_SEPARATOR.join(
        url_path_encode(key) + PARAM_VALUE_SEPARATOR + url_path_encode(_param_value(key, value))
        for key, value in params.items()
    )
