"""
Constants for the 11PATHS client library.
Header names and separators are part of the wire contract with the API.
"""

# HTTP Headers
AUTHORIZATION_HEADER_NAME = "Authorization"
X_11PATHS_HEADER_PREFIX = "X-11paths-"
DATE_HEADER_NAME = "X-11Paths-Date"
BODY_HASH_HEADER_NAME = X_11PATHS_HEADER_PREFIX + "Body-Hash"
FILE_HASH_HEADER_NAME = X_11PATHS_HEADER_PREFIX + "File-Hash"

# Content types
HTTP_HEADER_CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"
HTTP_HEADER_CONTENT_TYPE_JSON = "application/json"

# Signature format
AUTHORIZATION_METHOD = "11PATHS"
AUTHORIZATION_HEADER_FIELD_SEPARATOR = " "
X_11PATHS_HEADER_SEPARATOR = ":"
PARAM_SEPARATOR = "&"
PARAM_VALUE_SEPARATOR = "="
QUERYSTRING_DELIMITER = "?"
UTC_STRING_FORMAT = "%Y-%m-%d %H:%M:%S"

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")
QUERY_METHODS = ("GET", "DELETE")
PAYLOAD_METHODS = ("POST", "PUT")

MAX_INPUT_SIZE = 32 * 1024 * 1024  # 32MB

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,                  # HTTP timeout in seconds
    'proxies': None,                # requests-style proxy mapping
    'max_input_size': MAX_INPUT_SIZE,  # cap on signed body/file payloads
}
