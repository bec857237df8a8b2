from __future__ import annotations

import copy
import json
from typing import *
from unittest.mock import MagicMock

import pytest

from ocgeo.geocode import Geocode

FORWARD_PAYLOAD: dict[str, Any] = {
    "documentation": "https://opencagedata.com/api",
    "licenses": [{"name": "see attribution guide", "url": "https://opencagedata.com/credits"}],
    "rate": {"limit": 2500, "remaining": 2487, "reset": 1700006400},
    "results": [
        {
            "annotations": {
                "callingcode": 49,
                "currency": {
                    "alternate_symbols": ["€", "EUR"],
                    "decimal_mark": ",",
                    "html_entity": "&#x20AC;",
                    "iso_code": "EUR",
                    "iso_numeric": "978",
                    "name": "Euro",
                    "smallest_denomination": 1,
                    "subunit": "Cent",
                    "subunit_to_unit": 100,
                    "symbol": "€",
                    "symbol_first": 0,
                    "thousands_separator": ".",
                },
                "geohash": "u33dc0cppjs2tfvh8y2j",
                "roadinfo": {
                    "drive_on": "right",
                    "road": "Unter den Linden",
                    "speed_in": "km/h",
                },
                "timezone": {
                    "name": "Europe/Berlin",
                    "now_in_dst": 0,
                    "offset_sec": 3600,
                    "offset_string": "+0100",
                    "short_name": "CET",
                },
                "what3words": {"words": "nails.pose.varieties"},
            },
            "bounds": {
                "northeast": {"lat": 52.5173, "lng": 13.3781},
                "southwest": {"lat": 52.5153, "lng": 13.3761},
            },
            "components": {
                "ISO_3166-1_alpha-2": "DE",
                "ISO_3166-1_alpha-3": "DEU",
                "_category": "place",
                "_type": "building",
                "city": "Berlin",
                "continent": "Europe",
                "country": "Germany",
                "country_code": "de",
                "political_union": "European Union",
                "postcode": "10117",
                "road": "Pariser Platz",
                "suburb": "Mitte",
            },
            "confidence": 9,
            "formatted": "Brandenburg Gate, Pariser Platz, 10117 Berlin, Germany",
            "geometry": {"lat": 52.5162767, "lng": 13.3777025},
        },
        {
            "components": {
                "ISO_3166-1_alpha-2": "DE",
                "_type": "city",
                "city": "Berlin",
                "country": "Germany",
            },
            "confidence": 3,
            "formatted": "Berlin, Germany",
        },
    ],
    "status": {"code": 200, "message": "OK"},
    "stay_informed": {"blog": "https://blog.opencagedata.com"},
    "thanks": "For using an OpenCage API",
    "timestamp": {"created_http": "Tue, 14 Nov 2023 12:00:00 GMT", "created_unix": 1699963200},
    "total_results": 2,
}

QUOTA_PAYLOAD: dict[str, Any] = {
    "rate": {"limit": 2500, "remaining": 0, "reset": 1700006400},
    "results": [],
    "status": {"code": 402, "message": "quota exceeded"},
    "total_results": 0,
}


def make_http_response(body: Any, status_code: int = 200) -> MagicMock:
    text = body if isinstance(body, str) else json.dumps(body)

    r = MagicMock()
    r.status_code = status_code
    r.text = text
    r.json.side_effect = lambda: json.loads(text)

    return r


@pytest.fixture
def http_response() -> Callable[..., MagicMock]:
    return make_http_response


@pytest.fixture
def forward_payload() -> dict[str, Any]:
    return copy.deepcopy(FORWARD_PAYLOAD)


@pytest.fixture
def quota_payload() -> dict[str, Any]:
    return copy.deepcopy(QUOTA_PAYLOAD)


@pytest.fixture
def session(forward_payload: dict[str, Any]) -> MagicMock:
    session = MagicMock()
    session.get.return_value = make_http_response(forward_payload)
    return session


@pytest.fixture
def geocoder(session: MagicMock) -> Geocode:
    return Geocode(api_key="TEST-KEY", session=session)
