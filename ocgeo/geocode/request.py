from __future__ import annotations

import urllib.parse
from typing import *

from ocgeo.utils.coords import is_valid_bounds, is_valid_latlng
from ocgeo.utils.misc import API_URL, COORD_PRECISION

from .misc import Params


def format_coord(x: float) -> str:
    return f"{x:.{COORD_PRECISION}f}"


def reverse_query(lat: float, lng: float) -> str:
    """The free-text query the service expects for a reverse request: "<lat>,<lng>"."""
    return f"{format_coord(lat)},{format_coord(lng)}"


def q_escape(s: str, safe: str = "") -> str:
    """Percent-encodes everything except unreserved characters (letters, digits, "-._~")."""
    return urllib.parse.quote(s, safe=safe)


def _flag(value: bool | None) -> int:
    return 1 if value else 0


def params_to_query(is_forward: bool, params: Params) -> list[tuple[str, str]]:
    """The optional query parameters, as (name, value) pairs in a fixed order.

    Unset parameters are omitted; `no_annotations` is always present.
    `countrycode`, `roadinfo` and `proximity` only apply to forward requests, and are
    dropped from reverse ones. `proximity` and `bounds` are dropped if invalid.
    """
    query: list[tuple[str, str]] = []

    if params.abbrv:
        query.append(("abbrv", "1"))
    if is_forward and params.countrycode:
        query.append(("countrycode", q_escape(params.countrycode, safe=",")))
    if params.language:
        query.append(("language", q_escape(params.language)))
    if params.limit:
        query.append(("limit", str(params.limit)))
    if params.min_confidence:
        query.append(("min_confidence", str(params.min_confidence)))

    query.append(("no_annotations", str(_flag(params.no_annotations))))

    if params.no_dedupe:
        query.append(("no_dedupe", "1"))
    if params.no_record:
        query.append(("no_record", "1"))
    if params.pretty:
        query.append(("pretty", "1"))
    if is_forward and params.roadinfo:
        query.append(("roadinfo", "1"))
    if is_forward and is_valid_latlng(params.proximity):
        proximity = params.proximity
        query.append(("proximity", reverse_query(proximity.lat, proximity.lng)))  # type: ignore

    # The service wants the south-west corner first, each corner longitude first:
    # min lng, min lat, max lng, max lat.
    if is_valid_bounds(params.bounds):
        ne, sw = params.bounds.northeast, params.bounds.southwest  # type: ignore
        query.append(
            (
                "bounds",
                ",".join(map(format_coord, (sw.lng, sw.lat, ne.lng, ne.lat))),
            )
        )

    return query


def build_url(
    is_forward: bool,
    query: str,
    api_key: str,
    params: Params | None = None,
    url: str = API_URL,
) -> str:
    """Builds the full request URL.

    Args:
        is_forward (bool): Whether this is a forward (text to coordinates) request.
        query (str): The free-text query; for reverse requests, see `reverse_query`.
        api_key (str): The API key.
        params (Params, optional): Optional parameters. Defaults to `Params.defaults()`.
        url (str, optional): The service endpoint. Defaults to API_URL.

    Examples:
        >>> build_url(True, "Berlin", "KEY", Params(limit=1))
        'https://api.opencagedata.com/geocode/v1/json?q=Berlin&key=KEY&limit=1&no_annotations=1'
    """
    if params is None:
        params = Params.defaults()

    fragments = [f"q={q_escape(query)}", f"key={api_key}"]
    fragments += [f"{name}={value}" for name, value in params_to_query(is_forward, params)]

    return f"{url}?{'&'.join(fragments)}"
