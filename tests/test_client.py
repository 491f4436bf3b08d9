"""Tests for the requests-based Coaster API client.

A stub session stands in for the network and hands back prepared
``requests.Response`` objects.
"""

import json

import pytest
import requests

from coaster_client import CoasterAPI


def make_response(status_code, body=b"", headers=None, url="http://coasters.test/"):
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    response.headers.update(headers or {})
    response.url = url
    return response


class StubSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def coaster():
    return {"id": "17", "name": "Taron", "inPark": "Phantasialand", "manufacturer": "Intamin", "height": 30}


def test_list_coasters(coaster):
    session = StubSession(make_response(200, [coaster]))
    api = CoasterAPI(base_url="http://coasters.test/", session=session)
    data, error = api.list_coasters()
    assert error is None
    assert data == [coaster]
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://coasters.test/coasters")
    assert kwargs["allow_redirects"] is False


def test_create_coaster_sends_json(coaster):
    session = StubSession(make_response(201, coaster))
    api = CoasterAPI(base_url="http://coasters.test", session=session)
    payload = {k: v for k, v in coaster.items() if k != "id"}
    data, error = api.create_coaster(payload)
    assert error is None
    assert data["id"] == "17"
    assert session.calls[0][2]["json"] == payload


def test_get_coaster_not_found():
    session = StubSession(make_response(404, b"No content found for ID, 'x'"))
    api = CoasterAPI(base_url="http://coasters.test", session=session)
    data, error = api.get_coaster("x")
    assert data is None
    assert error == {"status_code": 404, "message": "No content found for ID, 'x'"}


def test_random_coaster_id_reads_location():
    session = StubSession(make_response(302, headers={"Location": "/coasters/99"}))
    api = CoasterAPI(base_url="http://coasters.test", session=session)
    assert api.random_coaster_id() == ("99", None)


def test_random_coaster_id_on_empty_store():
    session = StubSession(make_response(404, b"No coasters stored"))
    api = CoasterAPI(base_url="http://coasters.test", session=session)
    coaster_id, error = api.random_coaster_id()
    assert coaster_id is None
    assert error["status_code"] == 404


def test_admin_page_uses_basic_auth():
    session = StubSession(make_response(200, b"<div>Welcome, admin</div>"))
    api = CoasterAPI(base_url="http://coasters.test", admin_password="pw", session=session)
    html, error = api.admin_page()
    assert error is None
    assert "Welcome" in html
    assert session.calls[0][2]["auth"] == ("admin", "pw")


def test_admin_page_without_password_skips_request():
    session = StubSession()
    api = CoasterAPI(base_url="http://coasters.test", session=session)
    html, error = api.admin_page()
    assert html is None
    assert error["status_code"] is None
    assert session.calls == []


def test_connection_error_is_reported():
    session = StubSession(requests.ConnectionError("refused"))
    api = CoasterAPI(base_url="http://coasters.test", session=session)
    data, error = api.list_coasters()
    assert data == []
    assert error == {"status_code": None, "message": "refused"}
