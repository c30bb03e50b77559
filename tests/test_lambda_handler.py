try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import json

import pytest

from lambdas.auth_redirect import handler
from oauth_relay.models.gateway import GatewayRequest

DONE_STATE = "eyJyZWRpcmVjdF91cmwiOiJodHRwczovL2FwcC5leGFtcGxlL2RvbmUifQ=="


@pytest.fixture()
def lambda_client(monkeypatch, dummy_client):
    monkeypatch.setitem(handler.BOOTSTRAP, "oauth_client", dummy_client)
    return dummy_client


def test_callback_event_redirects_with_token(lambda_client) -> None:
    event = {
        "httpMethod": "GET",
        "path": "/callback",
        "queryStringParameters": {"state": DONE_STATE, "code": "oauth-code"},
    }

    response = handler.lambda_handler(event, None)

    assert response == {
        "statusCode": 302,
        "headers": {"Location": "https://app.example/done#access_token=abc123"},
    }
    assert lambda_client.codes == ["oauth-code"]


def test_null_query_parameters_are_treated_as_missing(lambda_client) -> None:
    event = {"httpMethod": "GET", "path": "/auth", "queryStringParameters": None}

    response = handler.lambda_handler(event, None)

    assert response["statusCode"] == 400
    assert json.loads(response["body"]) == {"error": "redirect_url parameter is required"}


def test_http_api_v2_events_use_raw_path(lambda_client) -> None:
    event = {
        "rawPath": "/auth",
        "queryStringParameters": {"redirect_url": "https://app.example/done"},
    }

    response = handler.lambda_handler(event, None)

    assert response["statusCode"] == 302
    assert lambda_client.states == [DONE_STATE]


def test_unknown_path_returns_not_found(lambda_client) -> None:
    response = handler.lambda_handler({"path": "/health"}, None)

    assert response["statusCode"] == 404
    assert response["body"] == '{"error": "not found"}'


def test_response_is_json_serializable(lambda_client) -> None:
    response = handler.lambda_handler({"path": "/callback"}, None)

    assert json.loads(json.dumps(response))["statusCode"] == 400


def test_request_from_event_copies_query() -> None:
    request = GatewayRequest.from_api_gateway_event(
        {"path": "/callback", "queryStringParameters": {"state": "s"}}
    )

    assert request == GatewayRequest(path="/callback", query={"state": "s"})
    assert request.param("code") == ""
