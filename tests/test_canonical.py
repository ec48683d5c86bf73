"""
Unit tests for header and param canonicalization.
"""

import pytest

from elevenpaths_client import InvalidInputError
from elevenpaths_client.canonical import (
    build_query_string,
    serialize_headers,
    serialize_params,
    url_encode,
    url_path_encode,
)


class TestSerializeHeaders:
    """Test X-11paths- header serialization."""

    def test_empty(self):
        """Test that no headers serialize to an empty string."""
        assert serialize_headers(None) == ""
        assert serialize_headers({}) == ""

    def test_single_header(self):
        """Test a single body hash header."""
        headers = {"X-11paths-Body-Hash": "406c917764ee655103d12a961d28a221bd8c8d98"}

        assert serialize_headers(headers) == "x-11paths-body-hash:406c917764ee655103d12a961d28a221bd8c8d98"

    def test_filters_other_headers(self):
        """Test that headers without the prefix are ignored."""
        headers = {
            "Content-Type": "application/json",
            "X-11Paths-Date": "2015-06-23 12:48:17",
            "Authorization": "11PATHS id sig",
        }

        assert serialize_headers(headers) == "x-11paths-date:2015-06-23 12:48:17"

    def test_only_other_headers(self):
        """Test that a mapping with no custom headers serializes to an empty string."""
        assert serialize_headers({"Accept": "*/*"}) == ""

    def test_sorted_by_lowercase_name(self):
        """Test that headers sort on lower-cased names, not raw names."""
        headers = {"X-11paths-B": "1", "X-11paths-a": "2"}

        assert serialize_headers(headers) == "x-11paths-a:2 x-11paths-b:1"

    def test_order_independent(self):
        """Test that insertion order does not change the result."""
        first = {"X-11paths-Zeta": "1", "x-11PATHS-alpha": "2", "X-11paths-Mid": "3"}
        second = dict(reversed(list(first.items())))

        assert serialize_headers(first) == serialize_headers(second)
        assert serialize_headers(first) == "x-11paths-alpha:2 x-11paths-mid:3 x-11paths-zeta:1"

    def test_newlines_replaced(self):
        """Test that newlines in values become spaces."""
        headers = {"X-11paths-Note": "two\nlines"}

        assert serialize_headers(headers) == "x-11paths-note:two lines"

    def test_interior_whitespace_kept(self):
        """Test that values are not trimmed."""
        headers = {"X-11paths-A": " padded  value", "X-11paths-B": "x"}

        assert serialize_headers(headers) == "x-11paths-a: padded  value x-11paths-b:x"

    def test_trailing_spaces_stripped(self):
        """Test that trailing spaces of the last value are dropped."""
        headers = {"X-11paths-A": " v ", "X-11paths-B": "w  "}

        assert serialize_headers(headers) == "x-11paths-a: v  x-11paths-b:w"

    def test_non_string_value(self):
        """Test that non-string header values are rejected."""
        with pytest.raises(InvalidInputError):
            serialize_headers({"X-11paths-Body-Hash": None})

        with pytest.raises(InvalidInputError):
            serialize_headers({"X-11paths-Count": 3})

    def test_non_string_value_other_header_ignored(self):
        """Test that values of headers without the prefix are not checked."""
        assert serialize_headers({"Content-Length": 3}) == ""

    def test_input_not_mutated(self):
        """Test that the input mapping is left untouched."""
        headers = {"X-11paths-Note": "two\nlines", "Accept": "*/*"}
        snapshot = dict(headers)

        serialize_headers(headers)

        assert headers == snapshot


class TestSerializeParams:
    """Test request param serialization."""

    def test_empty(self):
        """Test that no params serialize to an empty string."""
        assert serialize_params(None) == ""
        assert serialize_params({}) == ""

    def test_form_params(self):
        """Test the form params of the reference POST request."""
        params = {"name": "Api", "lastName": "Sdk test"}

        assert serialize_params(params) == "lastName=Sdk+test&name=Api"

    def test_ordinal_sort(self):
        """Test that keys sort by code point, upper case first."""
        params = {"a": "1", "_": "2", "B": "3"}

        assert serialize_params(params) == "B=3&_=2&a=1"

    def test_sorted_by_raw_key(self):
        """Test that sorting uses the key before encoding."""
        # "a b" < "a+" raw, but "a%2B" < "a+b" once encoded
        params = {"a+": "1", "a b": "2"}

        assert serialize_params(params) == "a+b=2&a%2B=1"

    def test_encodes_keys_and_values(self):
        """Test that keys and values are form-encoded."""
        params = {"e-mail": "user@example.com", "q": "a&b=c"}

        assert serialize_params(params) == "e-mail=user%40example.com&q=a%26b%3Dc"

    def test_non_string_value(self):
        """Test that non-string values are converted with str()."""
        assert serialize_params({"page": 2}) == "page=2"

    def test_none_value(self):
        """Test that None values are rejected."""
        with pytest.raises(InvalidInputError):
            serialize_params({"name": None})

    def test_order_independent(self):
        """Test that insertion order does not change the result."""
        first = {"z": "1", "a": "2", "m": "3"}
        second = {"m": "3", "z": "1", "a": "2"}

        assert serialize_params(first) == serialize_params(second)


class TestEncoding:
    """Test URL encoding helpers."""

    def test_url_encode(self):
        """Test form encoding of reserved and non-ASCII characters."""
        assert url_encode("a b~c!*()/é") == "a+b%7Ec!*()%2F%C3%A9"

    def test_url_encode_unreserved(self):
        """Test that alphanumerics and -_. are left alone."""
        assert url_encode("Az09-_.") == "Az09-_."

    def test_url_path_encode(self):
        """Test query string encoding."""
        assert url_path_encode("a b/é~") == "a%20b%2F%C3%A9~"

    def test_build_query_string(self):
        """Test query string building keeps caller order."""
        params = {"name": "Api", "lastName": "Sdk test"}

        assert build_query_string(params) == "?name=Api&lastName=Sdk%20test"

    def test_build_query_string_empty(self):
        """Test that no params produce no query string."""
        assert build_query_string(None) == ""
        assert build_query_string({}) == ""
