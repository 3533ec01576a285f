"""Tests for the REST backend client."""

from unittest.mock import MagicMock

import pytest
import requests

from utils.api import ApiClient, ApiError


def make_response(status_code=200, body=None, json_error=False):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return ApiClient(base_url="http://backend.test/", token="secret", timeout=5, session=session)


def test_token_header_sent_on_admin_calls(client, session):
    session.request.return_value = make_response(body={"success": True, "orders": []})

    assert client.post("/api/order/list", json={}) == {"success": True, "orders": []}

    args, kwargs = session.request.call_args
    assert args == ("POST", "http://backend.test/api/order/list")
    assert kwargs["headers"]["token"] == "secret"
    assert kwargs["json"] == {}
    assert kwargs["timeout"] == 5


def test_public_calls_skip_token(client, session):
    session.request.return_value = make_response(body={"success": True, "products": []})

    client.get("/api/product/list", params={"limit": 1000}, auth=False)

    kwargs = session.request.call_args.kwargs
    assert "token" not in kwargs["headers"]
    assert kwargs["params"] == {"limit": 1000}


def test_success_false_raises_with_backend_message(client, session):
    session.request.return_value = make_response(body={"success": False, "message": "Not Authorized"})

    with pytest.raises(ApiError, match="Not Authorized"):
        client.get("/api/section/admin")


def test_http_error_status(client, session):
    session.request.return_value = make_response(500, body={"message": "boom"})

    with pytest.raises(ApiError) as exc_info:
        client.post("/api/order/status", json={})
    assert exc_info.value.status_code == 500
    assert str(exc_info.value) == "boom"


def test_non_json_error_body(client, session):
    session.request.return_value = make_response(502, json_error=True)

    with pytest.raises(ApiError, match="HTTP 502"):
        client.get("/api/section/admin")


def test_transport_error_wrapped(client, session):
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ApiError, match="Cannot reach backend"):
        client.get("/api/section/admin")


def test_unexpected_body_shape(client, session):
    session.request.return_value = make_response(body=["not", "a", "dict"])

    with pytest.raises(ApiError):
        client.get("/api/section/admin")
