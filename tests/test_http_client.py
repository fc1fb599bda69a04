import json
import logging

import pytest
import requests

from conftest import FakeResponse, FakeSession, envelope
from instasheets.exceptions import ApiError, TransportError
from instasheets.tools.http.client import HttpJsonClient, endpoint_label

URL = "https://api.instagram.com/v1/users/self?access_token=123.abc.xyz"


def test_fetch_json_returns_envelope_after_one_get():
    session = FakeSession({URL: envelope({"username": "snoopy"})})
    env = HttpJsonClient(session=session).fetch_json(URL)
    assert env.data == {"username": "snoopy"}
    assert session.get_calls == [URL]


def test_error_status_in_body_raises_api_error_even_with_http_400():
    body = envelope(None, code=400, error_type="OAuthParameterException", error_message="bad token")
    session = FakeSession({URL: FakeResponse(body, status_code=400)})
    with pytest.raises(ApiError) as exc:
        HttpJsonClient(session=session).fetch_json(URL)
    assert exc.value.code == 400
    assert exc.value.kind == "OAuthParameterException"
    assert len(session.get_calls) == 1  # no retry


def test_non_json_body_is_transport_error():
    session = FakeSession({URL: FakeResponse("<html>502</html>", status_code=502)})
    with pytest.raises(TransportError):
        HttpJsonClient(session=session).fetch_json(URL)


def test_network_failure_is_transport_error():
    session = FakeSession({URL: requests.ConnectionError("down")})
    with pytest.raises(TransportError):
        HttpJsonClient(session=session).fetch_json(URL)


def test_fetch_end_logs_endpoint_path_and_duration(caplog):
    session = FakeSession({URL: envelope({})})
    with caplog.at_level(logging.INFO, logger="platform_monitoring"):
        HttpJsonClient(session=session).fetch_json(URL)
    end = [r.getMessage() for r in caplog.records if "http.fetch.end" in r.getMessage()]
    assert len(end) == 1
    assert "'endpoint': '/v1/users/self'" in end[0]
    assert "'duration_ms':" in end[0]
    assert endpoint_label(URL) == "/v1/users/self"


def test_body_decoded_from_raw_bytes_not_charset_guess():
    body = json.dumps(envelope({"full_name": "Zoë Café"}), ensure_ascii=False)
    resp = requests.Response()
    resp.status_code = 200
    resp._content = body.encode("utf-16")
    resp.encoding = None
    session = FakeSession({URL: resp})
    env = HttpJsonClient(session=session).fetch_json(URL)
    assert env.data == {"full_name": "Zoë Café"}


def test_logged_url_has_token_redacted(caplog):
    session = FakeSession({URL: envelope({})})
    with caplog.at_level(logging.INFO, logger="platform_monitoring"):
        HttpJsonClient(session=session).fetch_json(URL)
    assert "123.abc.xyz" not in caplog.text
    assert "access_token=***REDACTED***" in caplog.text
