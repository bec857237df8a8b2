from __future__ import annotations

import json
from typing import *

import requests
from loguru import logger

from ocgeo.utils.misc import DEFAULT_TIMEOUT, USER_AGENT, StatusCode


class OpenCageException(Exception):
    pass


class RequestFailedError(OpenCageException):
    """The HTTP exchange could not be completed, or its body was not JSON."""


class MalformedResponseError(OpenCageException):
    """The response body is missing a field the service always sends."""


class InvalidRequestError(OpenCageException):
    pass


class AuthenticationError(OpenCageException):
    pass


class QuotaExceededError(OpenCageException):
    pass


class ForbiddenError(OpenCageException):
    pass


class RateLimitExceededError(OpenCageException):
    pass


def raise_for_status(code: int, message: str = "") -> None:
    if code == StatusCode.OK:
        return

    detail = f"{code}: {message}" if message else str(code)

    if code == StatusCode.INVALID_REQUEST:
        raise InvalidRequestError(f"The request was invalid ({detail}).")
    elif code == StatusCode.AUTH_ERROR:
        raise AuthenticationError(f"Unable to authenticate ({detail}).")
    elif code == StatusCode.QUOTA_ERROR:
        raise QuotaExceededError(f"Your quota has been exceeded ({detail}).")
    elif code == StatusCode.FORBIDDEN:
        raise ForbiddenError(f"Your API key is blocked ({detail}).")
    elif code == StatusCode.TOO_MANY_REQUESTS:
        raise RateLimitExceededError(f"Too many requests ({detail}).")
    else:
        raise OpenCageException(f"An unexpected error occurred ({detail}).")


def http_get(
    url: str,
    session: requests.Session | None = None,
    user_agent: str = USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """GET `url` and parse the body as JSON.

    The body is parsed whatever the HTTP status: the service reports its errors
    inside the JSON document, which the caller decodes like any other response.

    Raises:
        RequestFailedError: if the exchange failed, or the body is not JSON.
    """
    getter = session if session is not None else requests

    try:
        r = getter.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"Request failed: {e}")
        raise RequestFailedError(f"Request to the geocoding service failed: {e}") from e

    logger.debug(f"HTTP {r.status_code}")

    try:
        data = r.json()
    except (requests.exceptions.JSONDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Failed to parse response body (HTTP {r.status_code}): {e}")
        raise RequestFailedError(
            f"The geocoding service returned a non-JSON body (HTTP {r.status_code})."
        ) from e

    return data
