#!/usr/bin/env python3
"""
Basic usage examples for the 11PATHS Python client library.

Computes the authentication headers of a few requests offline, then, when a
base URL is given on the command line, sends an authenticated GET.

    python example_usage.py [base_url]
"""

import json
import logging
import sys

from elevenpaths_client import (
    Credentials,
    ElevenPathsClient,
    ElevenPathsError,
    sign,
    sign_for_body,
    sign_for_file,
    sign_for_params,
)

APP_ID = "iy4G8PgdwxZ6z4KhaGDK"
APP_SECRET = "sEuLkTNfPfBpZJ3bwHs4FvixsQbdDqppi8kB4rcz"
PATH = "/api/0.1"
TIMESTAMP = "2015-06-23 12:48:17"


def show(title, result):
    print(title)
    for name, value in result.headers().items():
        print(f"   {name}: {value}")
    print()


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=== 11PATHS Python Client Basic Usage Examples ===\n")

    credentials = Credentials(APP_ID, APP_SECRET)
    print(f"App id: {credentials.app_id}")
    print(f"Secret key: {credentials.secret_key[:8]}...\n")

    show("1. Bare GET", sign(credentials, "GET", PATH, TIMESTAMP))
    show("2. POST with form params",
         sign_for_params(credentials, "POST", PATH, TIMESTAMP, {"name": "Api", "lastName": "Sdk test"}))
    body = json.dumps({"name": "Test", "lastName": "Api Sdk"}, separators=(',', ':'))
    show("3. POST with JSON body", sign_for_body(credentials, "POST", PATH, TIMESTAMP, body))
    show("4. POST with file", sign_for_file(credentials, "POST", PATH, TIMESTAMP, b"Api SDK test."))

    if len(sys.argv) < 2:
        return 0

    print(f"5. Authenticated GET to {sys.argv[1]}{PATH}")
    try:
        with ElevenPathsClient(sys.argv[1], APP_ID, APP_SECRET) as client:
            response = client.get(PATH)
            print(f"   Status: {response.status_code}")
            print(f"   Body: {response.text[:200]}")
    except ElevenPathsError as e:
        print(f"   ✗ Request failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
