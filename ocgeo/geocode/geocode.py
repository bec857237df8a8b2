from __future__ import annotations

import json
import os
from collections.abc import Callable
from typing import *

import requests
from loguru import logger

from ocgeo.utils.coords import is_valid_latlng
from ocgeo.utils.http import http_get
from ocgeo.utils.misc import (
    API_KEY_ENV_VAR,
    API_URL,
    API_URL_ENV_VAR,
    DEFAULT_TIMEOUT,
    USER_AGENT,
)

from .decode import decode_response
from .misc import LatLng, Params, Response
from .request import build_url, reverse_query


class Geocode:
    """A client for the OpenCage geocoding API.

    Each call performs one blocking GET and returns a `Response`; service errors
    (bad key, quota exceeded, ...) come back as a response whose `ok` is False,
    while transport failures raise `RequestFailedError`.

    Args:
        api_key (str, optional): The API key. If None, the OPENCAGE_API_KEY env var is used.
        url (str, optional): The service endpoint. If None, the OPENCAGE_API_URL env var
            is used, falling back to API_URL.
        session (requests.Session, optional): The session to send requests with.
            Defaults to a new session owned by this client.
        timeout (float, optional): Request timeout, in seconds. Defaults to DEFAULT_TIMEOUT.
        debug_callback (Callable[[str], Any], optional): Called with the pretty-printed
            JSON body of every response, before it is decoded.
    """

    def __init__(
        self,
        api_key: str | None = None,
        url: str | None = None,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        debug_callback: Callable[[str], Any] | None = None,
    ):
        api_key = api_key if api_key is not None else os.environ.get(API_KEY_ENV_VAR)
        if not api_key:
            raise ValueError(
                f"An API key is required: pass api_key or set {API_KEY_ENV_VAR}."
            )

        self.api_key = api_key
        self.url = url if url is not None else os.environ.get(API_URL_ENV_VAR, API_URL)
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.debug_callback = debug_callback

    def _request(self, is_forward: bool, query: str, params: Params | None) -> Response:
        if params is None:
            params = Params.defaults()

        url = build_url(
            is_forward=is_forward,
            query=query,
            api_key=self.api_key,
            params=params,
            url=self.url,
        )
        logger.debug(f"GET {url.replace(self.api_key, '<key>')}")

        tree = http_get(url, session=self.session, user_agent=USER_AGENT, timeout=self.timeout)

        if self.debug_callback is not None:
            self.debug_callback(json.dumps(tree, indent=4, ensure_ascii=False))

        return decode_response(tree, url=url)

    def forward(self, query: str, params: Params | None = None) -> Response:
        """Forward geocoding: a place description to coordinates and a structured address.

        Args:
            query (str): Free-text place description, e.g. "Syena, Aswan Governorate, Egypt".
            params (Params, optional): Optional request parameters. Defaults to `Params.defaults()`.
        """
        return self._request(True, query, params)

    def reverse(self, lat: float, lng: float, params: Params | None = None) -> Response:
        """Reverse geocoding: coordinates to a structured address.

        Forward-only parameters (countrycode, roadinfo, proximity) are ignored.

        Out-of-range coordinates are rejected locally, without a request, rather than
        being sent for the service to answer with a 400 status.

        Raises:
            ValueError: if (lat, lng) is not a valid point.
        """
        if not is_valid_latlng(LatLng(lat=lat, lng=lng)):
            raise ValueError(f"Invalid coordinates: ({lat}, {lng})")

        return self._request(False, reverse_query(lat, lng), params)

    def close(self) -> None:
        """Closes the session, unless it was passed in by the caller."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Geocode:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
