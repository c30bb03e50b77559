try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import httpx
import pytest

from oauth_relay.dependencies import get_google_oauth_client
from oauth_relay.main import create_app

DONE_STATE = "eyJyZWRpcmVjdF91cmwiOiJodHRwczovL2FwcC5leGFtcGxlL2RvbmUifQ=="


@pytest.fixture()
def app_client(dummy_client):
    app = create_app()
    app.dependency_overrides[get_google_oauth_client] = lambda: dummy_client
    yield app, dummy_client
    app.dependency_overrides.clear()


def _http(app) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    )


@pytest.mark.anyio
async def test_auth_redirects_to_consent_screen(app_client):
    app, dummy_client = app_client
    async with _http(app) as client:
        response = await client.get(
            "/auth", params={"redirect_url": "https://app.example/done"}
        )

    assert response.status_code == 302
    assert response.headers["location"] == (
        f"https://oauth.example.com/auth?state={DONE_STATE}"
    )
    assert dummy_client.states == [DONE_STATE]


@pytest.mark.anyio
async def test_callback_redirects_with_fragment(app_client):
    app, dummy_client = app_client
    async with _http(app) as client:
        response = await client.get(
            "/callback", params={"state": DONE_STATE, "code": "oauth-code"}
        )

    assert response.status_code == 302
    assert response.headers["location"] == "https://app.example/done#access_token=abc123"
    assert dummy_client.codes == ["oauth-code"]


@pytest.mark.anyio
async def test_missing_parameter_returns_json_error(app_client):
    app, _ = app_client
    async with _http(app) as client:
        response = await client.get("/callback", params={"code": "oauth-code"})

    assert response.status_code == 400
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"error": "state parameter is required"}


@pytest.mark.anyio
@pytest.mark.parametrize("path", ["/health", "/docs", "/"])
async def test_other_paths_are_not_found(app_client, path: str):
    app, _ = app_client
    async with _http(app) as client:
        response = await client.get(path)

    assert response.status_code == 404
    assert response.json() == {"error": "not found"}


@pytest.mark.anyio
@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
async def test_non_get_requests_reach_the_router(app_client, method: str):
    app, _ = app_client
    async with _http(app) as client:
        response = await client.request(method, "/health")

    assert response.status_code == 404
    assert response.json() == {"error": "not found"}
