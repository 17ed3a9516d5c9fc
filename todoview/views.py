"""Server-side rendering of the todo page."""

from pathlib import Path
from urllib.parse import quote

from fastapi import Request
from fastapi.templating import Jinja2Templates

from todoview.models.todo import TodoState

PAGE_TEMPLATE = "index.html"

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def quote_id(todo_id: int | str) -> str:
    """Encode a todo id as a single path segment."""
    return quote(str(todo_id), safe="")


templates.env.filters["quote_id"] = quote_id


def render_page(state: TodoState) -> str:
    return templates.get_template(PAGE_TEMPLATE).render(state=state)


def page_response(request: Request, state: TodoState):
    return templates.TemplateResponse(request, PAGE_TEMPLATE, {"state": state})
