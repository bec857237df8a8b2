from __future__ import annotations

from enum import IntEnum

import requests

VERSION = "0.1.0"

API_URL = "https://api.opencagedata.com/geocode/v1/json"

API_KEY_ENV_VAR = "OPENCAGE_API_KEY"

API_URL_ENV_VAR = "OPENCAGE_API_URL"

DEFAULT_TIMEOUT = 30  # seconds

# Fractional digits used whenever a coordinate is written into a URL.
COORD_PRECISION = 8

USER_AGENT = f"ocgeo-python/{VERSION} (python-requests/{requests.__version__})"


class StatusCode(IntEnum):
    """Status codes reported by the service in the response's `status.code` field.

    The service mirrors these as HTTP status codes, but the JSON body is authoritative.
    """

    # The request was processed successfully.
    OK = 200
    # Invalid request: a required parameter is missing, invalid coordinates, version or format.
    INVALID_REQUEST = 400
    # Unable to authenticate: missing, invalid, or unknown API key.
    AUTH_ERROR = 401
    # Valid request but quota exceeded (payment required).
    QUOTA_ERROR = 402
    # Forbidden: the API key is blocked.
    FORBIDDEN = 403
    # Invalid API endpoint.
    INVALID_ENDPOINT = 404
    # Method not allowed (non-GET request).
    INVALID_METHOD = 405
    # Timeout; the request can be tried again.
    TIMEOUT = 408
    # The request was too long.
    REQUEST_TOO_LONG = 410
    # Too many requests, too quickly.
    TOO_MANY_REQUESTS = 429
    # Internal server error.
    INTERNAL_ERROR = 503
