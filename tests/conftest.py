import json

import pytest
import requests

from todoview.config import Settings
from todoview.controller import TodoViewController
from todoview.models.todo import Task


# --- Canned service payloads ---

TODO_BUY_MILK = {"id": 1, "text": "buy milk", "completed": False}
TODO_CALL_BOB = {"id": 2, "text": "call bob", "completed": True}
TODO_WALK_DOG = {"id": 3, "text": "walk dog", "completed": False}

TODO_LIST = [TODO_BUY_MILK, TODO_CALL_BOB, TODO_WALK_DOG]

BASE_URL = "http://todo.test/api/todos"


def make_response(status_code: int = 200, body=None, raw: bytes | None = None) -> requests.Response:
    """Build a real requests.Response carrying a JSON body (or raw bytes)."""
    resp = requests.Response()
    resp.status_code = status_code
    if raw is not None:
        resp._content = raw
    elif body is not None:
        resp._content = json.dumps(body).encode()
    else:
        resp._content = b""
    return resp


@pytest.fixture
def settings(mocker):
    s = Settings(_env_file=None, environment="development", dev_api_url=BASE_URL)
    mocker.patch("todoview.services.todos.get_settings", return_value=s)
    return s


@pytest.fixture
def mock_session(mocker, settings):
    """Session whose request() returns an empty 200 unless configured otherwise."""
    session = mocker.MagicMock()
    session.request.return_value = make_response(200)
    mocker.patch("todoview.services.todos.get_session", return_value=session)
    return session


@pytest.fixture
def mock_service(mocker):
    """Fully mocked todo service module as seen by the controller."""
    svc = mocker.patch("todoview.controller.todos_service")
    svc.list_todos.return_value = [Task(**t) for t in TODO_LIST]
    return svc


@pytest.fixture
def controller():
    return TodoViewController()


@pytest.fixture
def api_client(controller):
    """TestClient wired to a fresh controller."""
    from fastapi.testclient import TestClient
    from todoview.controller import get_controller
    from todoview.main import app

    app.dependency_overrides[get_controller] = lambda: controller
    yield TestClient(app)
    app.dependency_overrides.clear()
