from urllib.parse import quote

import requests
from pydantic import ValidationError

from todoview.config import get_settings
from todoview.exceptions import RequestFailedError
from todoview.http_client import get_session
from todoview.models.todo import CreateTodoRequest, Task


def _collection_url() -> str:
    return get_settings().collection_url


def _item_url(todo_id: int | str) -> str:
    return f"{_collection_url()}/{quote(str(todo_id), safe='')}"


def _send(method: str, url: str, payload: dict | None = None) -> requests.Response:
    """Issue one request and return the response if its status is 2xx."""
    try:
        resp = get_session().request(
            method,
            url,
            json=payload,
            timeout=get_settings().request_timeout,
        )
    except requests.RequestException as e:
        raise RequestFailedError(f"{method} {url} failed: {e}") from e
    if not 200 <= resp.status_code < 300:
        raise RequestFailedError(f"{method} {url} failed: HTTP {resp.status_code}")
    return resp


def _parse_todos(resp: requests.Response) -> list[Task]:
    if not resp.content:
        return []
    try:
        data = resp.json()
    except ValueError as e:
        raise RequestFailedError(f"Todo list response is not JSON: {e}") from e
    if not data:
        return []
    if not isinstance(data, list):
        raise RequestFailedError(f"Todo list response is not an array: {type(data).__name__}")
    try:
        return [Task.model_validate(item) for item in data]
    except ValidationError as e:
        raise RequestFailedError(f"Todo list response has malformed items: {e}") from e


def list_todos() -> list[Task]:
    """Fetch the whole collection, in the order the service returns it."""
    resp = _send("GET", _collection_url())
    return _parse_todos(resp)


def create_todo(text: str) -> None:
    """Create a todo. The service-assigned id is not read; callers re-sync instead."""
    payload = CreateTodoRequest(text=text, completed=False)
    _send("POST", _collection_url(), payload.model_dump())


def replace_todo(todo: Task) -> None:
    """Replace a todo with the given full representation."""
    _send("PUT", _item_url(todo.id), todo.model_dump())


def delete_todo(todo_id: int | str) -> None:
    _send("DELETE", _item_url(todo_id))
