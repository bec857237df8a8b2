from __future__ import annotations

import json
import os
from typing import *
from unittest.mock import MagicMock

import pytest
import requests

from ocgeo.geocode import Geocode, LatLng, Params
from ocgeo.utils import API_KEY_ENV_VAR, API_URL, API_URL_ENV_VAR, USER_AGENT, RequestFailedError


def sent_url(session: MagicMock) -> str:
    args, kwargs = session.get.call_args
    return args[0]


def test_forward(geocoder: Geocode, session: MagicMock):
    response = geocoder.forward("Brandenburg Gate, Berlin")

    assert response.ok
    assert len(response.results) == 2
    assert response.results[0].components.city == "Berlin"

    url = sent_url(session)
    assert url.startswith(f"{API_URL}?q=Brandenburg%20Gate%2C%20Berlin&key=TEST-KEY")
    assert url.endswith("&no_annotations=1")
    assert response.url == url

    _, kwargs = session.get.call_args
    assert kwargs["headers"]["User-Agent"] == USER_AGENT


def test_forward_params(geocoder: Geocode, session: MagicMock):
    geocoder.forward("Berlin", Params(language="de", limit=2, countrycode="de"))

    assert "&countrycode=de&language=de&limit=2&no_annotations=1" in sent_url(session)


def test_reverse(geocoder: Geocode, session: MagicMock):
    params = Params(countrycode="de", roadinfo=True, proximity=LatLng(lat=52.5, lng=13.4))

    response = geocoder.reverse(52.5162767, 13.3777025, params)

    assert response.ok
    url = sent_url(session)
    assert url.startswith(f"{API_URL}?q=52.51627670%2C13.37770250&key=TEST-KEY")
    assert "countrycode=" not in url
    assert "roadinfo=" not in url
    assert "proximity=" not in url


def test_reverse_invalid_coordinates(geocoder: Geocode, session: MagicMock):
    with pytest.raises(ValueError):
        geocoder.reverse(-91.0, -181.0)

    session.get.assert_not_called()


def test_service_error_is_a_response(
    geocoder: Geocode,
    session: MagicMock,
    quota_payload: dict[str, Any],
    http_response: Callable[..., MagicMock],
):
    session.get.return_value = http_response(quota_payload, status_code=402)

    response = geocoder.forward("Syena, Aswan Governorate, Egypt")

    assert not response.ok
    assert response.status.code == 402
    assert response.results == []


def test_transport_failure(geocoder: Geocode, session: MagicMock):
    session.get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(RequestFailedError) as e:
        geocoder.forward("Berlin")

    assert isinstance(e.value.__cause__, requests.ConnectionError)


def test_non_json_body(
    geocoder: Geocode, session: MagicMock, http_response: Callable[..., MagicMock]
):
    session.get.return_value = http_response("<html>Bad Gateway</html>", status_code=502)

    with pytest.raises(RequestFailedError):
        geocoder.forward("Berlin")


def test_debug_callback(session: MagicMock, forward_payload: dict[str, Any]):
    received: list[str] = []
    geocoder = Geocode(api_key="TEST-KEY", session=session, debug_callback=received.append)

    response = geocoder.forward("Berlin")

    assert len(received) == 1
    assert json.loads(received[0]) == forward_payload
    assert len(response.results) == 2


def test_config_from_env(monkeypatch: pytest.MonkeyPatch, session: MagicMock):
    monkeypatch.setenv(API_KEY_ENV_VAR, "ENV-KEY")
    monkeypatch.setenv(API_URL_ENV_VAR, "http://localhost:8080/geocode")

    geocoder = Geocode(session=session)
    geocoder.forward("Berlin")

    assert sent_url(session).startswith("http://localhost:8080/geocode?q=Berlin&key=ENV-KEY&")


def test_missing_api_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)

    with pytest.raises(ValueError):
        Geocode()


@pytest.mark.skipif(
    not os.environ.get(API_KEY_ENV_VAR), reason=f"{API_KEY_ENV_VAR} is not set"
)
def test_forward_live():
    with Geocode() as geocoder:
        with geocoder.forward("Syena, Aswan Governorate, Egypt") as response:
            assert response.ok
            assert len(response.results) >= 1
            assert response.results[0].components.country == "Egypt"


def test_close_keeps_injected_session(session: MagicMock):
    with Geocode(api_key="TEST-KEY", session=session) as geocoder:
        geocoder.forward("Berlin")

    session.close.assert_not_called()


def test_close_owned_session(monkeypatch: pytest.MonkeyPatch):
    owned = MagicMock()
    monkeypatch.setattr(requests, "Session", lambda: owned)

    with Geocode(api_key="TEST-KEY") as geocoder:
        assert geocoder.session is owned

    owned.close.assert_called_once()
