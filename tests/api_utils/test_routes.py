from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api_utils import create_app
from api_utils.dependencies import get_browser_session, get_server_state, get_settings
from api_utils.server_state import state
from config.settings import AppSettings
from models import NavigationError, PromptRequest, PromptResult, SessionNotReadyError


@pytest.fixture
def app():
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: AppSettings(environment="development")
    yield app
    state.reset()


@pytest.fixture
def session():
    session = MagicMock()
    session.send_prompt = AsyncMock(return_value=PromptResult(threadId="abc-123", response="Hi"))
    return session


def test_prompt_forwards_request_fields(app, session):
    app.dependency_overrides[get_browser_session] = lambda: session
    client = TestClient(app)

    response = client.post(
        "/api/prompt",
        json={"prompt": "Hello", "reason": True, "search": False, "threadId": "abc-123"},
    )

    assert response.status_code == 200
    request = session.send_prompt.call_args.args[0]
    assert request == PromptRequest(prompt="Hello", reason=True, search=False, threadId="abc-123")
    assert session.send_prompt.call_args.kwargs["req_id"]


def test_prompt_with_no_reply_returns_nulls(app, session):
    session.send_prompt.return_value = PromptResult(threadId=None, response=None)
    app.dependency_overrides[get_browser_session] = lambda: session

    response = TestClient(app).post("/api/prompt", json={"prompt": "Hello"})

    assert response.json() == {"threadId": None, "response": None}


def test_prompt_requires_text(app, session):
    app.dependency_overrides[get_browser_session] = lambda: session

    response = TestClient(app).post("/api/prompt", json={"reason": True})

    assert response.status_code == 422


def test_prompt_without_session_is_unavailable(app):
    state.session = None

    response = TestClient(app).post("/api/prompt", json={"prompt": "Hello"})

    assert response.status_code == 503
    assert "error" in response.json()


def test_browser_failure_maps_to_bad_gateway(app, session):
    session.send_prompt.side_effect = NavigationError("Navigation to https://chatgpt.com failed")
    app.dependency_overrides[get_browser_session] = lambda: session

    response = TestClient(app).post("/api/prompt", json={"prompt": "Hello"})

    assert response.status_code == 502
    assert response.json() == {"error": "Navigation to https://chatgpt.com failed"}


def test_session_lost_mid_request_is_unavailable(app, session):
    session.send_prompt.side_effect = SessionNotReadyError("Browser session is not ready")
    app.dependency_overrides[get_browser_session] = lambda: session

    response = TestClient(app).post("/api/prompt", json={"prompt": "Hello"})

    assert response.status_code == 503
    assert response.headers["Retry-After"] == "30"


@pytest.mark.parametrize(
    "server_state, status_code, status",
    [
        (dict(is_initializing=False, is_browser_connected=True, is_logged_in=True, startup_error=None), 200, "ok"),
        (dict(is_initializing=True, is_browser_connected=True, is_logged_in=False, startup_error=None), 503, "initializing"),
        (dict(is_initializing=False, is_browser_connected=False, is_logged_in=False, startup_error="boom"), 503, "error"),
    ],
)
def test_health(app, server_state, status_code, status):
    app.dependency_overrides[get_server_state] = lambda: server_state

    response = TestClient(app).get("/health")

    assert response.status_code == status_code
    assert response.json()["status"] == status
    assert response.json()["loggedIn"] is server_state["is_logged_in"]


def test_health_is_not_gated():
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: AppSettings(api_key="k", environment="production")

    response = TestClient(app).get("/health")

    assert response.status_code in (200, 503)
    assert response.status_code != 401
