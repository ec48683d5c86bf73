"""
HTTP client for APIs authenticated with 11PATHS signatures.

The client builds each request, asks the signer for its authentication
headers and sends it through a ``requests.Session``. Both the session and
the clock producing X-11Paths-Date values can be injected.
"""

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union
from urllib.parse import urljoin, urlsplit

import requests
from requests.utils import requote_uri

from .canonical import build_query_string, serialize_params
from .constants import (
    DEFAULT_CONFIG,
    HTTP_HEADER_CONTENT_TYPE_FORM_URLENCODED,
    HTTP_HEADER_CONTENT_TYPE_JSON,
    PAYLOAD_METHODS,
    QUERYSTRING_DELIMITER,
)
from .exceptions import (
    ConfigurationError,
    HTTPError,
    InputTooLargeError,
    InvalidInputError,
)
from .signer import (
    Credentials,
    SignatureResult,
    sign,
    sign_for_body,
    sign_for_file,
    sign_for_params,
    sign_for_query,
)
from .utils import content_bytes, current_utc

logger = logging.getLogger(__name__)


class ElevenPathsClient:
    """
    Client for making 11PATHS-authenticated requests.

    Every request is signed with the application credentials and a fresh
    timestamp from the client's clock.
    """

    def __init__(self, base_url: str, app_id: str, secret_key: str,
                 clock: Optional[Callable[[], str]] = None,
                 session: Optional[requests.Session] = None, **config):
        """
        Initialize the client.

        Args:
            base_url: Absolute http(s) URL of the API
            app_id: Application ID
            secret_key: Secret shared with the API (must match server)
            clock: Callable returning the current UTC time as
                ``yyyy-MM-dd HH:mm:ss``; defaults to the system clock
            session: requests session used as transport
            **config: Configuration options (timeout, proxies, max_input_size)
        """
        if not base_url or not base_url.strip():
            raise ConfigurationError("base_url cannot be empty")
        self.base_url = base_url.strip().rstrip('/')
        self.credentials = Credentials(app_id, secret_key)
        self.clock = clock or current_utc

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        # Validate configuration
        self._validate_config()

        self.session = session if session is not None else requests.Session()
        if self.config['proxies']:
            self.session.proxies.update(self.config['proxies'])

        logger.info(f"Initialized 11PATHS client for {self.base_url} (app id {app_id})")

    def _validate_config(self):
        """Validate client configuration."""
        parts = urlsplit(self.base_url)
        if parts.scheme not in ('http', 'https') or not parts.netloc:
            raise ConfigurationError(f"base_url must be an absolute http(s) URL: {self.base_url!r}")

        if self.config['timeout'] is not None and self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

        if self.config['max_input_size'] <= 0:
            raise ConfigurationError("max_input_size must be positive")

        proxies = self.config['proxies']
        if proxies is not None and not isinstance(proxies, Mapping):
            raise ConfigurationError("proxies must be a mapping of scheme to proxy URL")

    def _check_input_size(self, data: bytes):
        """Check if input data exceeds size limit."""
        if len(data) > self.config['max_input_size']:
            raise InputTooLargeError(
                f"Input size {len(data)} exceeds limit {self.config['max_input_size']}"
            )

    def _build_url(self, path: str, params=None) -> str:
        if not path or not path.strip():
            raise InvalidInputError("path cannot be empty")
        path = path.strip().lstrip('/') + build_query_string(params)
        # Signed path must match the URL requests puts on the wire
        return requote_uri(urljoin(self.base_url + '/', path))

    @staticmethod
    def _signable_path(url: str) -> str:
        """Return the part of the URL from the first slash after the host."""
        parts = urlsplit(url)
        path = parts.path or '/'
        if parts.query:
            path += QUERYSTRING_DELIMITER + parts.query
        return path

    def authentication_headers(self, method: str, path: str,
                               params: Optional[Mapping[str, Any]] = None,
                               body: Optional[Union[str, bytes]] = None,
                               file_content: Optional[bytes] = None) -> Dict[str, str]:
        """
        Compute the headers authenticating a request.

        At most one of ``params``, ``body`` and ``file_content`` may be given.
        For GET and DELETE, ``params`` are the query params; for POST and PUT
        they are the form params.

        Args:
            method: HTTP method
            path: URL-encoded path from the first slash, query string included
            params: URL-decoded params
            body: Raw request body
            file_content: Content of the uploaded file

        Returns:
            Header mapping to merge into the request

        Raises:
            InvalidInputError: If more than one payload is given or the
                request is malformed
        """
        payloads = [p for p in (params, body, file_content) if p is not None]
        if len(payloads) > 1:
            raise InvalidInputError("only one of params, body or file content can be signed")

        timestamp = self.clock()
        result: SignatureResult
        if file_content is not None:
            result = sign_for_file(self.credentials, method, path, timestamp, file_content)
        elif body is not None:
            result = sign_for_body(self.credentials, method, path, timestamp, body)
        elif params is not None and method.upper() in PAYLOAD_METHODS:
            result = sign_for_params(self.credentials, method, path, timestamp, params)
        elif params:
            result = sign_for_query(self.credentials, method, path, timestamp, params)
        else:
            result = sign(self.credentials, method, path, timestamp)
        return result.headers()

    def _prepare_request_body(self, json_data=None, body=None) -> Optional[bytes]:
        """Prepare raw request body for signing."""
        if json_data is not None:
            return json.dumps(json_data, separators=(',', ':')).encode('utf-8')
        elif body is not None:
            return content_bytes(body, "body")
        return None

    def _make_request(self, method: str, path: str, params=None, data=None, json_data=None,
                      body=None, file=None, filename=None, **kwargs) -> requests.Response:
        """
        Make authenticated HTTP request.

        Args:
            method: HTTP method
            path: URL path (relative to base_url)
            params: Query params (GET, DELETE)
            data: Form params (POST, PUT)
            json_data: JSON document to send
            body: Raw data to send
            file: File content to upload as multipart
            filename: Name of the uploaded file
            **kwargs: Additional requests arguments

        Returns:
            requests.Response object

        Raises:
            InvalidInputError: If more than one payload is given
            HTTPError: If request fails
        """
        payloads = [p for p in (data, json_data, body, file) if p is not None]
        if len(payloads) > 1:
            raise InvalidInputError("only one of data, json, body or file can be sent")

        url = self._build_url(path, params)
        signable_path = self._signable_path(url)

        headers = dict(kwargs.pop('headers', None) or {})
        raw_body = self._prepare_request_body(json_data, body)

        if file is not None:
            file = content_bytes(file, "file")
            self._check_input_size(file)
            headers.update(self.authentication_headers(method, signable_path, file_content=file))
            kwargs['files'] = {'file': (filename or 'file', file)}
        elif raw_body is not None:
            self._check_input_size(raw_body)
            headers.update(self.authentication_headers(method, signable_path, body=raw_body))
            headers.setdefault('Content-Type', HTTP_HEADER_CONTENT_TYPE_JSON)
            kwargs['data'] = raw_body
        elif data is not None:
            headers.update(self.authentication_headers(method, signable_path, params=data))
            headers['Content-Type'] = HTTP_HEADER_CONTENT_TYPE_FORM_URLENCODED
            kwargs['data'] = serialize_params(data).encode('ascii')
        else:
            headers.update(self.authentication_headers(method, signable_path, params=params))

        kwargs['headers'] = headers
        kwargs.setdefault('timeout', self.config['timeout'])

        logger.debug(f"Sending {method} {url}")
        try:
            return self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise HTTPError(f"HTTP request failed: {e}") from e

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None, **kwargs) -> requests.Response:
        """Make authenticated GET request."""
        return self._make_request('GET', path, params=params, **kwargs)

    def post(self, path: str, data=None, json=None, body=None, file=None, filename=None,
             **kwargs) -> requests.Response:
        """Make authenticated POST request with form params, a JSON or raw body, or a file."""
        return self._make_request('POST', path, data=data, json_data=json, body=body,
                                  file=file, filename=filename, **kwargs)

    def put(self, path: str, data=None, json=None, body=None, **kwargs) -> requests.Response:
        """Make authenticated PUT request with form params or a JSON or raw body."""
        return self._make_request('PUT', path, data=data, json_data=json, body=body, **kwargs)

    def delete(self, path: str, params: Optional[Mapping[str, Any]] = None, **kwargs) -> requests.Response:
        """Make authenticated DELETE request."""
        return self._make_request('DELETE', path, params=params, **kwargs)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
